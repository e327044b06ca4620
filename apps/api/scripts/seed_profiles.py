"""
Seed the profiles table with sample directory profiles.
Run from apps/api: python scripts/seed_profiles.py
"""
import asyncio
import logging
import sys
from pathlib import Path

# Ensure talent_api is importable when run from repo root or apps/api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)

from sqlalchemy import select

from talent_api.db.models import Profile
from talent_api.db.session import async_session

# Mix of pipe-structured and free-text headlines so both skill extraction paths show up
SAMPLE_PROFILES = [
    {
        "full_name": "Alex Johnson",
        "username": "alexjohnson",
        "headline": "Frontend Developer | JavaScript, React, Node.js, TypeScript, MongoDB, Express",
    },
    {
        "full_name": "Sarah Chen",
        "username": "sarahchen",
        "headline": "Data Scientist | Python, Data Science, Machine Learning, SQL, TensorFlow",
    },
    {
        "full_name": "Michael Rodriguez",
        "username": "mrodriguez",
        "headline": "Software Engineer | Java, Spring Boot, Microservices, AWS, Docker, Kubernetes, 6 years experience",
    },
    {
        "full_name": "Emily Taylor",
        "username": "emilytaylor",
        "headline": "UX Designer | UX/UI Design, Figma, Adobe XD, HTML/CSS, User Research",
    },
    {
        "full_name": "David Kim",
        "username": "davidkim",
        "headline": "iOS Developer | iOS Development, Swift, SwiftUI, Objective-C, Firebase",
    },
    {
        "full_name": "Jessica Martinez",
        "username": "jmartinez",
        "headline": "Product Manager | Product Management, Agile, Scrum, User Stories, Roadmapping",
    },
    {
        "full_name": None,
        "username": "cloudnative_sam",
        "headline": "Backend engineer building Go and Python services on AWS and Kubernetes",
    },
    {
        "full_name": "Priya Nair",
        "username": "priyanair",
        "headline": "Loves hiking, mentoring, and shipping things",
    },
]


async def run_seed() -> None:
    async with async_session() as session:
        existing = set(
            (await session.execute(select(Profile.username).where(Profile.username.isnot(None))))
            .scalars()
            .all()
        )
        added = 0
        for data in SAMPLE_PROFILES:
            if data["username"] in existing:
                logger.info("Skipping existing profile: %s", data["username"])
                continue
            session.add(Profile(**data))
            added += 1
        await session.commit()
    logger.info("Done. Seeded %s profiles (%s already present)", added, len(SAMPLE_PROFILES) - added)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Starting profile seed: %s profiles", len(SAMPLE_PROFILES))
    asyncio.run(run_seed())
