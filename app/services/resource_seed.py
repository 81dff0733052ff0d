# app/services/resource_seed.py
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from app.models.resource import Resource

logger = logging.getLogger(__name__)

INITIAL_RESOURCES: List[Dict[str, str]] = [
    {
        "title": "Understanding Mental Health",
        "description": "Learn about different mental health conditions, their symptoms, and treatment options.",
        "link": "https://www.nimh.nih.gov/health/topics",
        "category": "education",
    },
    {
        "title": "Coping Strategies for Stress",
        "description": "Discover effective techniques for managing stress, anxiety, and other mental health challenges.",
        "link": "https://www.apa.org/topics/stress",
        "category": "coping",
    },
    {
        "title": "Self-Care Guide",
        "description": "Practical tips and guides for maintaining your mental well-being through self-care practices.",
        "link": "https://www.mind.org.uk/information-support/tips-for-everyday-living/self-care/",
        "category": "self-care",
    },
    {
        "title": "Crisis Resources",
        "description": "Immediate help and support resources for mental health crises and emergencies.",
        "link": "https://988lifeline.org/",
        "category": "crisis",
    },
    {
        "title": "10 Ways to Manage Anxiety",
        "description": "Practical techniques you can use daily to reduce anxiety and improve your mental well-being.",
        "link": "https://www.healthline.com/health/mental-health/how-to-cope-with-anxiety",
        "category": "anxiety",
    },
    {
        "title": "The Importance of Sleep for Mental Health",
        "description": "Learn how quality sleep impacts your mental health and discover tips for better sleep hygiene.",
        "link": "https://www.sleepfoundation.org/mental-health",
        "category": "wellness",
    },
    {
        "title": "Building Resilience",
        "description": "Strategies for developing emotional resilience and bouncing back from life's challenges.",
        "link": "https://www.apa.org/topics/resilience",
        "category": "coping",
    },
    {
        "title": "Mindfulness Meditation Guide",
        "description": "Learn the basics of mindfulness meditation and how it can improve your mental well-being.",
        "link": "https://www.mindful.org/how-to-meditate/",
        "category": "mindfulness",
    },
    {
        "title": "Understanding Depression",
        "description": "Comprehensive guide to understanding depression, its symptoms, and available treatment options.",
        "link": "https://www.nimh.nih.gov/health/topics/depression",
        "category": "education",
    },
]


def seed_resources(db: Session) -> int:
    """Insert the initial catalogue into an empty ``resources`` table.

    Not an upsert: if any resource already exists nothing is written.
    Returns the number of rows inserted.
    """
    existing = db.query(Resource).count()
    if existing > 0:
        logger.info("Resources already exist (%d). Skipping seed.", existing)
        return 0

    for data in INITIAL_RESOURCES:
        db.add(Resource(**data))
    db.commit()

    logger.info("Successfully seeded %d resources", len(INITIAL_RESOURCES))
    return len(INITIAL_RESOURCES)
