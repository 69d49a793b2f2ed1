# scripts/seed_data.py
#  to run the script, run the following command:
#  python scripts/seed_data.py

"""
Seed Script
Creates the tables, the default administrator account and a starter
catalogue of diseases. Safe to run more than once.
"""
import sys
import asyncio
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from config.appconfig import settings
from app.database.connection import build_engine, build_session_factory, create_tables
from app.system_models.disease_model.disease_schemas import DiseaseCreate
from app.system_services.disease_services import create_disease, get_disease_by_name
from app.users.user_models.schemas import UserCreate
from app.users.user_services import create_user, get_user_by_username, password_matches

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DISEASE_CATALOGUE = [
    {
        "name": "Tuberculosis",
        "type": "infectious",
        "description": "Bacterial infection mainly affecting the lungs",
        "symptoms": "Persistent cough, fever, night sweats, weight loss",
        "infectious": True,
        "reportable": True,
    },
    {
        "name": "Malaria",
        "type": "infectious",
        "description": "Mosquito-borne parasitic infection",
        "symptoms": "Fever, chills, headache, vomiting",
        "infectious": True,
        "reportable": True,
    },
    {
        "name": "Dengue",
        "type": "infectious",
        "description": "Mosquito-borne viral infection",
        "symptoms": "High fever, severe headache, joint and muscle pain, rash",
        "infectious": True,
        "reportable": True,
    },
    {
        "name": "Hepatitis B",
        "type": "infectious",
        "description": "Viral infection of the liver",
        "symptoms": "Jaundice, fatigue, abdominal pain",
        "infectious": True,
        "reportable": True,
    },
    {
        "name": "Hypertension",
        "type": "chronic",
        "description": "Persistently raised blood pressure",
        "symptoms": "Often none; headache, dizziness",
        "infectious": False,
        "reportable": False,
    },
    {
        "name": "Diabetes Mellitus",
        "type": "chronic",
        "description": "Chronic high blood glucose",
        "symptoms": "Thirst, frequent urination, fatigue",
        "infectious": False,
        "reportable": False,
    },
    {
        "name": "Heat Stroke",
        "type": "acute",
        "description": "Core temperature above 40°C from heat exposure",
        "symptoms": "Confusion, hot dry skin, collapse",
        "infectious": False,
        "reportable": False,
    },
    {
        "name": "Occupational Dermatitis",
        "type": "non_infectious",
        "description": "Skin inflammation from workplace exposure",
        "symptoms": "Redness, itching, blistering",
        "infectious": False,
        "reportable": False,
    },
]


async def seed() -> None:
    engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    session_factory = build_session_factory(engine)

    try:
        await create_tables(engine)

        async with session_factory() as db:
            admin = await get_user_by_username(db, settings.DEFAULT_ADMIN_USERNAME)
            if admin is None:
                await create_user(
                    db,
                    UserCreate(
                        username=settings.DEFAULT_ADMIN_USERNAME,
                        password=settings.DEFAULT_ADMIN_PASSWORD,
                        name=settings.DEFAULT_ADMIN_NAME,
                        role="admin",
                    ),
                )
                logger.info(f"✓ Created default admin account: {settings.DEFAULT_ADMIN_USERNAME}")
            else:
                logger.info("✓ Admin account already present")
                if password_matches(admin, settings.DEFAULT_ADMIN_PASSWORD):
                    logger.warning(f"⚠️ {admin.username} still uses the default password, change it")

            created = 0
            for entry in DISEASE_CATALOGUE:
                if await get_disease_by_name(db, entry["name"]) is None:
                    await create_disease(db, DiseaseCreate(**entry))
                    created += 1
            logger.info(f"✓ Disease catalogue: {created} added, {len(DISEASE_CATALOGUE) - created} already present")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    print("=======================================================================\n")
    asyncio.run(seed())
    print("=======================================================================\n")
