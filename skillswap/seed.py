#!/usr/bin/env python3
"""Populate the database with demo users and skills, then print a summary.

Run with ``python -m skillswap.seed``. Users that already exist are left
untouched, so the script can be re-run safely.
"""

import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.database import create_tables, AsyncSessionLocal
from skillswap.models.skill import SkillType
from skillswap.repositories.user_repository import UserRepository
from skillswap.repositories.skill_repository import SkillRepository
from skillswap.schemas.user import UserCreate
from skillswap.schemas.skill import SkillCreate

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    {
        "username": "alice@example.com",
        "name": "Alice Johnson",
        "bio": "Full-stack developer passionate about web technologies. Looking to expand into design.",
        "location": "San Francisco, CA",
        "availability": "Weekends and evenings",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Alice",
    },
    {
        "username": "bob@example.com",
        "name": "Bob Smith",
        "bio": "Graphic designer with 5+ years experience. Love creating visual stories.",
        "location": "New York, NY",
        "availability": "Flexible schedule",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Bob",
    },
    {
        "username": "charlie@example.com",
        "name": "Charlie Brown",
        "bio": "Professional guitarist and music producer. Always eager to learn new languages.",
        "location": "Los Angeles, CA",
        "availability": "Evenings after 6 PM",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Charlie",
    },
    {
        "username": "diana@example.com",
        "name": "Diana Prince",
        "bio": "Language enthusiast and Spanish teacher. Interested in coding and tech.",
        "location": "Austin, TX",
        "availability": "Weekdays 10 AM - 5 PM",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Diana",
    },
    {
        "username": "eve@example.com",
        "name": "Eve Wilson",
        "bio": "Creative professional with diverse interests. Love sharing knowledge and learning new things.",
        "location": "Seattle, WA",
        "availability": "Weekends only",
        "avatar_url": "https://api.dicebear.com/7.x/avataaars/svg?seed=Eve",
    },
]

# (owner index into DEMO_USERS, title, description, category, type)
DEMO_SKILLS = [
    (0, "React Development", "Building modern web applications with React", "Tech", SkillType.TEACH),
    (0, "UI/UX Design", "Creating intuitive user interfaces", "Design", SkillType.LEARN),
    (1, "Graphic Design", "Logo design, branding, and visual identity", "Design", SkillType.TEACH),
    (1, "Guitar Lessons", "Learn to play acoustic guitar", "Music", SkillType.LEARN),
    (2, "Guitar Playing", "Rock, blues, and fingerstyle guitar techniques", "Music", SkillType.TEACH),
    (2, "Spanish Conversation", "Improve conversational Spanish skills", "Language", SkillType.LEARN),
    (3, "Spanish Language", "Native Spanish speaker offering lessons", "Language", SkillType.TEACH),
    (3, "JavaScript Programming", "Learn the basics of JavaScript", "Tech", SkillType.LEARN),
    (4, "Photography", "Digital photography and editing techniques", "Design", SkillType.TEACH),
    (4, "Piano Lessons", "Beginner to intermediate piano instruction", "Music", SkillType.TEACH),
    (4, "French Language", "Learn French for travel and conversation", "Language", SkillType.LEARN),
]


async def create_demo_data(db: AsyncSession):
    """Insert demo users and the skills of newly created users.

    Returns ``(users, skills)`` where ``users`` holds every demo user
    (new or pre-existing) and ``skills`` only the skills created now.
    """
    user_repo = UserRepository(db)
    skill_repo = SkillRepository(db)

    users = []
    new_user_indexes = set()
    for index, user_data in enumerate(DEMO_USERS):
        existing_user = await user_repo.get_by_username(user_data["username"])
        if existing_user:
            users.append(existing_user)
            print(f"User {existing_user.username} exists (ID: {existing_user.id})")
            continue

        user = await user_repo.create(UserCreate(password=DEMO_PASSWORD, **user_data))
        users.append(user)
        new_user_indexes.add(index)
        print(f"Created user: {user.name} (ID: {user.id})")

    skills = []
    for owner_index, title, description, category, skill_type in DEMO_SKILLS:
        if owner_index not in new_user_indexes:
            continue
        skill = await skill_repo.create(
            SkillCreate(title=title, description=description, category=category, type=skill_type),
            users[owner_index].id
        )
        skills.append(skill)
        print(f"Created skill: {skill.title} for user {skill.user_id}")

    return users, skills


async def print_summary(db: AsyncSession):
    skills = await SkillRepository(db).list_skills()
    owners = {skill.user.id: skill.user for skill in skills}

    print("\nSkill owners:")
    for user in owners.values():
        print(f"  - {user.name} ({user.username})")

    print(f"\nSkills: {len(skills)}")
    for skill in skills:
        print(f"  - {skill.title} ({skill.category}, {skill.type.value}) by {skill.user.name}")


async def main():
    print("Creating demo data for SkillSwap...\n")

    try:
        await create_tables()
        async with AsyncSessionLocal() as db:
            await create_demo_data(db)
            await print_summary(db)
        print(f"\nDemo accounts use the password: {DEMO_PASSWORD}")
    except Exception as e:
        print(f"Error creating demo data: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
