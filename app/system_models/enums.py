# app/system_models/enums.py
from typing import Literal, get_args

# Allowed values as constants, shared by ORM columns and request schemas
GENDER = Literal["male", "female", "other"]
HEALTH_STATUS = Literal["healthy", "under_treatment", "critical", "recovered"]
ALERT_SEVERITY = Literal["low", "medium", "high", "critical"]
DISEASE_TYPE = Literal["infectious", "non_infectious", "chronic", "acute"]

GENDERS = get_args(GENDER)
HEALTH_STATUSES = get_args(HEALTH_STATUS)
ALERT_SEVERITIES = get_args(ALERT_SEVERITY)
DISEASE_TYPES = get_args(DISEASE_TYPE)
