import logging
from app.config.database import SessionLocal
from app.config.settings import settings
from app.models.blog import BlogPost
from app.models.product import Product
from app.models.user import User
from app.utils.security import get_password_hash

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Premium Solar Panel 400W",
        "description": "High-efficiency monocrystalline solar panel with 25-year performance warranty.",
        "price": 349.99,
        "category": "Solar Panels",
        "image_url": "https://images.unsplash.com/photo-1509391366360-2e959784a276?auto=format&fit=crop&w=800&q=60",
        "specifications": {"power": "400W", "efficiency": "21.5%", "cells": "144 half-cut monocrystalline cells", "dimensions": "2000 x 1000 x 35 mm"},
        "stock": 50,
        "featured": True,
    },
    {
        "name": "SmartInvert Pro 5kW",
        "description": "Hybrid solar inverter with battery backup capability and smart monitoring.",
        "price": 1299.99,
        "category": "Inverters",
        "image_url": "https://images.unsplash.com/photo-1613665813446-82a78c468a1d?auto=format&fit=crop&w=800&q=60",
        "specifications": {"power": "5kW", "efficiency": "98%", "mppt": "2 MPPT trackers", "warranty": "10 years"},
        "stock": 25,
        "featured": True,
    },
    {
        "name": "EcoHeat Solar 200L",
        "description": "Evacuated tube solar water heater with 200-liter capacity for residential use.",
        "price": 899.99,
        "category": "Water Heaters",
        "image_url": "https://images.unsplash.com/photo-1621267860478-dbad5e247732?auto=format&fit=crop&w=800&q=60",
        "specifications": {"capacity": "200L", "tubes": "20 evacuated tubes", "tank": "Stainless steel, insulated", "mountType": "Roof or ground mounted"},
        "stock": 15,
        "featured": True,
    },
    {
        "name": "SolarPump 3HP",
        "description": "3HP submersible solar water pump for agriculture and domestic applications.",
        "price": 749.99,
        "category": "Water Pumps",
        "image_url": "https://images.unsplash.com/photo-1592833167578-28dedde37909?auto=format&fit=crop&w=800&q=60",
        "specifications": {"power": "3HP", "maxHead": "80m", "flow": "10,000L/hour", "material": "Stainless steel"},
        "stock": 20,
        "featured": True,
    },
]

SAMPLE_POSTS = [
    {
        "title": "The Benefits of Solar Energy for Residential Properties",
        "content": "Discover how installing solar panels can significantly reduce your electricity bills and increase your property value while contributing to a greener planet.",
        "image_url": "https://images.unsplash.com/photo-1508514177221-188b1cf16e9d?auto=format&fit=crop&w=800&q=60",
    },
    {
        "title": "How Solar Water Pumps Revolutionize Agriculture",
        "content": "Solar water pumps are changing the face of agriculture by providing reliable irrigation solutions that are both cost-effective and environmentally friendly.",
        "image_url": "https://images.unsplash.com/photo-1559302995-f8d7c620f2d3?auto=format&fit=crop&w=800&q=60",
    },
    {
        "title": "Choosing the Right Solar Inverter for Your Home",
        "content": "Learn about the different types of solar inverters available and how to select the most suitable one for your specific energy needs and budget.",
        "image_url": "https://images.unsplash.com/photo-1497440001374-f26997328c1b?auto=format&fit=crop&w=800&q=60",
    },
]

def seed():
    db = SessionLocal()
    try:
        if db.query(User).first():
            logger.info("Database already seeded")
            return

        logger.info("Creating superuser: %s", settings.ADMIN_USERNAME)
        admin = User(
            username=settings.ADMIN_USERNAME,
            email=settings.ADMIN_EMAIL,
            hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
            full_name="Admin User",
            role="super_admin",
        )
        db.add(admin)
        db.flush()

        for product in SAMPLE_PRODUCTS:
            db.add(Product(**product))
        for post in SAMPLE_POSTS:
            db.add(BlogPost(author_id=admin.id, is_approved=True, **post))

        db.commit()
        logger.info("Seeding completed successfully!")
    except Exception as e:
        db.rollback()
        logger.error("Error seeding database: %s", e)
        raise
    finally:
        db.close()

if __name__ == "__main__":
    from app.config.database import init_db
    from app.config.logging_config import configure_logging
    configure_logging()
    init_db(seed=False)
    seed()
