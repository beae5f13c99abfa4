"""
Sample data for a new ranch account.

seed() only adds rows to the session it is given; the caller owns the
transaction so a failure part way through leaves nothing behind.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ranch_api.models import (
    Animal,
    BreedingRecord,
    Document,
    Equipment,
    HealthRecord,
    InventoryItem,
    MaintenanceRecord,
    Transaction,
)
from ranch_shared.config.logging import get_logger, mask_user_id

logger = get_logger(__name__)


ANIMALS = [
    dict(tag_id="COW001", name="Bessie", species="Cattle", breed="Holstein", gender="female",
         birth_date=date(2020, 3, 15), location="North Pasture", current_weight=Decimal("1200")),
    dict(tag_id="COW002", name="Thunder", species="Cattle", breed="Angus", gender="male",
         birth_date=date(2019, 5, 10), location="South Pasture", current_weight=Decimal("1800")),
    dict(tag_id="SH001", name="Woolly", species="Sheep", breed="Merino", gender="female",
         birth_date=date(2021, 2, 8), location="Sheep Pen", current_weight=Decimal("180")),
    dict(tag_id="PIG001", name="Porky", species="Pigs", breed="Yorkshire", gender="male",
         birth_date=date(2023, 1, 12), location="Pig Pen", current_weight=Decimal("250")),
    dict(tag_id="CH001", name="Henrietta", species="Chickens", breed="Rhode Island Red",
         gender="female", birth_date=date(2023, 3, 20), location="Chicken Coop",
         current_weight=Decimal("6")),
]

TRANSACTIONS = [
    ("income", "Livestock Sales", "2500.00", "Sold 2 calves at local market", date(2024, 1, 10)),
    ("income", "Dairy Products", "850.00", "Monthly milk sales to local dairy", date(2024, 1, 31)),
    ("expense", "Feed & Nutrition", "1200.00", "Hay and grain purchase for winter", date(2024, 1, 5)),
    ("expense", "Veterinary & Health", "165.00", "Vaccination and health check costs", date(2024, 1, 15)),
    ("expense", "Equipment & Machinery", "450.00", "Tractor maintenance and repairs", date(2024, 1, 20)),
    ("income", "Crop Sales", "3200.00", "Corn harvest sales", date(2024, 2, 1)),
    ("expense", "Utilities & Fuel", "380.00", "Electricity and fuel costs", date(2024, 2, 5)),
]

INVENTORY = [
    ("Alfalfa Hay", "Feed & Nutrition", "45", "bales", "10", "12.50", "Hay Barn"),
    ("Corn Feed", "Feed & Nutrition", "2000", "lbs", "500", "0.18", "Feed Storage"),
    ("Cattle Vaccine (BVDV)", "Veterinary Supplies", "8", "doses", "3", "5.25", "Medical Cabinet"),
    ("Barbed Wire", "Equipment & Tools", "500", "feet", "100", "0.45", "Equipment Shed"),
    ("Mineral Supplements", "Feed & Nutrition", "12", "bags", "3", "28.75", "Feed Storage"),
    ("Bedding Straw", "Bedding & Supplies", "20", "bales", "5", "8.00", "Barn Storage"),
]

EQUIPMENT = [
    ("John Deere 5075E", "Tractors", "5075E", "John Deere", "operational", "45000.00", "38000.00"),
    ("Bush Hog Rotary Cutter", "Mowers", "RDH2084", "Bush Hog", "operational", "8500.00", "6800.00"),
    ("Kubota Hay Baler", "Balers", "BV5160", "Kubota", "maintenance", "28000.00", "24000.00"),
    ("Fertilizer Spreader", "Sprayers", "FS2000", "Ag-Pro", "operational", "12000.00", "10500.00"),
    ("Livestock Trailer", "Trailers", "LT2450", "Titan", "operational", "15000.00", "14200.00"),
]


def has_data(db: Session, user_id: str) -> bool:
    """True if the user already owns any animal."""
    count = db.scalar(select(func.count()).select_from(Animal).where(Animal.user_id == user_id))
    return bool(count)


def seed(db: Session, user_id: str) -> dict[str, int]:
    """
    Insert sample livestock, finance and operations records for user_id.
    Returns the number of rows added per entity.
    """
    animals = [Animal(user_id=user_id, **data) for data in ANIMALS]
    db.add_all(animals)
    db.flush()
    cow, bull, sheep = animals[0], animals[1], animals[2]

    health = [
        HealthRecord(user_id=user_id, animal_id=cow.id, type="vaccination",
                     description="Annual vaccination - BVDV, IBR, PI3", date=date(2024, 1, 15),
                     veterinarian="Dr. Sarah Johnson", cost=Decimal("45.00"),
                     next_due_date=date(2025, 1, 15)),
        HealthRecord(user_id=user_id, animal_id=bull.id, type="checkup",
                     description="Routine health examination", date=date(2024, 2, 10),
                     veterinarian="Dr. Sarah Johnson", cost=Decimal("85.00")),
        HealthRecord(user_id=user_id, animal_id=sheep.id, type="treatment",
                     description="Hoof trimming and care", date=date(2024, 3, 5),
                     veterinarian="Dr. Mike Wilson", cost=Decimal("35.00")),
    ]
    breeding = [
        BreedingRecord(user_id=user_id, mother_id=cow.id, father_id=bull.id,
                       breeding_date=date(2024, 1, 20), expected_birth_date=date(2024, 10, 15),
                       notes="First breeding for this pair"),
    ]
    transactions = [
        Transaction(user_id=user_id, type=t, category=c, amount=Decimal(a), description=d, date=dt)
        for t, c, a, d, dt in TRANSACTIONS
    ]
    inventory = [
        InventoryItem(user_id=user_id, name=n, category=c, quantity=Decimal(q), unit=u,
                      min_threshold=Decimal(m), cost_per_unit=Decimal(p), location=loc)
        for n, c, q, u, m, p, loc in INVENTORY
    ]
    equipment = [
        Equipment(user_id=user_id, name=n, type=t, model=mdl, manufacturer=mf, status=s,
                  purchase_price=Decimal(pp), current_value=Decimal(cv))
        for n, t, mdl, mf, s, pp, cv in EQUIPMENT
    ]
    db.add_all(health + breeding + transactions + inventory + equipment)
    db.flush()

    maintenance = [
        MaintenanceRecord(user_id=user_id, equipment_id=equipment[0].id, type="routine",
                          description="Oil change and filter replacement", date=date(2024, 1, 20),
                          cost=Decimal("85.00"), performed_by="Ranch Maintenance Team",
                          next_maintenance_date=date(2024, 4, 20)),
        MaintenanceRecord(user_id=user_id, equipment_id=equipment[2].id, type="repair",
                          description="Belt replacement and tension adjustment",
                          date=date(2024, 2, 15), cost=Decimal("150.00"),
                          performed_by="Kubota Service Center",
                          next_maintenance_date=date(2024, 8, 15)),
    ]
    documents = [
        Document(user_id=user_id, title="Cattle Health Certificates", category="Animal Health",
                 description="Official health certificates for cattle herd",
                 file_url="/documents/cattle-health-cert-2024.pdf",
                 file_name="cattle-health-cert-2024.pdf", file_size=1250000,
                 mime_type="application/pdf", expiry_date=date(2025, 1, 10), uploaded_by=user_id),
    ]
    db.add_all(maintenance + documents)
    db.flush()

    counts = {
        "animals": len(animals),
        "health_records": len(health),
        "breeding_records": len(breeding),
        "transactions": len(transactions),
        "inventory_items": len(inventory),
        "equipment": len(equipment),
        "maintenance_records": len(maintenance),
        "documents": len(documents),
    }
    logger.info("Sample data seeded", user_id=mask_user_id(user_id), **counts)
    return counts
