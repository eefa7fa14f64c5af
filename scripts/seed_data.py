#!/usr/bin/env python3
"""
Database seeding script for development.
Creates an admin user, categories, sample projects with images, a video,
content blocks and the site settings row.
"""

import asyncio
import os
import sys
from pathlib import Path
from datetime import date

# Add parent directory to path to import our modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from portfolio_cms.database import async_engine, Base, AsyncSessionLocal
from portfolio_cms.models import (
    Category,
    ContentBlock,
    ImageType,
    Project,
    ProjectImage,
    ProjectVideo,
    SiteSettings,
    SITE_SETTINGS_ID,
    User,
    VideoType,
)
from portfolio_cms.services.auth_service import AuthService
from portfolio_cms.services.site_settings_service import DEFAULT_SITE_SETTINGS

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-{}?w=1200"


async def create_tables():
    """Create all database tables"""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("✓ Database tables created")


async def seed_data():
    """Seed the database with sample data"""
    async with AsyncSessionLocal() as session:
        try:
            admin = User(
                email=os.getenv("SEED_ADMIN_EMAIL", "admin@galreforms.com"),
                password_hash=AuthService.hash_password(os.getenv("SEED_ADMIN_PASSWORD", "change-me-now")),
                full_name="Administrador",
                role="admin",
            )
            session.add(admin)
            await session.flush()
            print("✓ Created admin user")

            residential = Category(name="Reforma Residencial", slug="reforma-residencial")
            kitchens = Category(name="Cozinhas e Banheiros", slug="cozinhas-e-banheiros")
            commercial = Category(name="Projetos Comerciais", slug="projetos-comerciais")
            session.add_all([residential, kitchens, commercial])
            await session.flush()
            print("✓ Created categories")

            kitchen = Project(
                title="Reforma de Cozinha Integrada",
                slug="reforma-cozinha",
                category=kitchens.name,
                category_id=kitchens.id,
                location="Valencia",
                short_description="Cozinha aberta com ilha central e bancada em quartzo",
                description="<p>Demolição da parede divisória e integração com a sala.</p>",
                cover_image=PLACEHOLDER_IMAGE.format("1556911220-bff31c812dba"),
                client="Família Martins",
                completion_date=date(2024, 5, 20),
                area_sqm=24.5,
                budget_range="15.000€ - 25.000€",
                materials={"Bancada": "Quartzo branco", "Piso": "Porcelanato"},
                features=["Ilha central", "Iluminação LED embutida"],
                published=True,
            )
            apartment = Project(
                title="Apartamento Completo no Centro",
                slug="apartamento-centro",
                category=residential.name,
                category_id=residential.id,
                location="Madrid",
                area_sqm=85.0,
                bedrooms=2,
                bathrooms=1,
                materials={"Piso": "Madeira natural"},
                features=["Nova instalação elétrica"],
                published=True,
            )
            office = Project(
                title="Escritório Coworking",
                slug="escritorio-coworking",
                category=commercial.name,
                category_id=commercial.id,
                published=False,
            )
            session.add_all([kitchen, apartment, office])
            await session.flush()
            print("✓ Created projects")

            images = []
            for index, photo in enumerate(["1556909114-f6e7ad7d3136", "1484154218962-a197022b5858"]):
                images.append(ProjectImage(
                    project_id=kitchen.id,
                    image_url=PLACEHOLDER_IMAGE.format(photo),
                    image_type=ImageType.GALLERY,
                    alt_text=f"Cozinha reformada {index + 1}",
                    order_index=index,
                ))
            images.append(ProjectImage(
                project_id=kitchen.id,
                image_url=PLACEHOLDER_IMAGE.format("1600585154340-be6161a56a0c"),
                image_type=ImageType.BEFORE,
                caption="Antes da obra",
                order_index=0,
            ))
            images.append(ProjectImage(
                project_id=kitchen.id,
                image_url=PLACEHOLDER_IMAGE.format("1600607687939-ce8a6c25118c"),
                image_type=ImageType.AFTER,
                caption="Depois da obra",
                order_index=0,
            ))
            session.add_all(images)

            session.add(ProjectVideo(
                project_id=kitchen.id,
                video_url="https://www.youtube.com/embed/dQw4w9WgXcQ",
                video_type=VideoType.YOUTUBE,
                title="Tour pela cozinha",
                order_index=0,
            ))

            session.add_all([
                ContentBlock(
                    project_id=kitchen.id,
                    block_type="text",
                    content={"text": "<p>O cliente queria uma cozinha aberta para receber a família.</p>"},
                    order_index=0,
                ),
                ContentBlock(
                    project_id=kitchen.id,
                    block_type="quote",
                    content={"quote": "Ficou exatamente como sonhamos.", "author": "Ana Martins", "role": "Cliente"},
                    order_index=1,
                ),
            ])
            await session.flush()
            print("✓ Created media and content blocks")

            session.add(SiteSettings(id=SITE_SETTINGS_ID, **DEFAULT_SITE_SETTINGS))
            await session.flush()
            print("✓ Created site settings")

            await session.commit()
            print("\n✅ Database seeding completed successfully!")

            print("\nSummary:")
            print("  - Users: 1 (admin)")
            print("  - Categories: 3")
            print("  - Projects: 3 (2 published)")
            print(f"  - Images: {len(images)}")
            print("  - Videos: 1")
            print("  - Content blocks: 2")

        except Exception as e:
            await session.rollback()
            print(f"❌ Error seeding database: {e}")
            raise


async def main():
    """Main function"""
    print("Starting database seeding...\n")

    if "--create-tables" in sys.argv:
        await create_tables()

    await seed_data()


if __name__ == "__main__":
    asyncio.run(main())
