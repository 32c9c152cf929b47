"""
Demo data seeding script.

Creates a handful of authors and posts so a fresh database has something to
list. Safe to run repeatedly: existing emails and titles are skipped.

Usage:
    uv run python -m blog_api.db.seed
"""

from asyncio import run as asyncio_run
from dataclasses import dataclass
from typing import NamedTuple

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.database import init_db, transaction
from blog_api.managers.password_manager import hash_password
from blog_api.models import UserDB
from blog_api.monitoring import configure_logging, get_logger
from blog_api.repositories import PostRepository, UserRepository
from blog_api.schemas.post import PostCreate, PostState
from blog_api.schemas.user import UserCreate

logger = get_logger(__name__)

SEED_PASSWORD = "password123"


class SeedAuthor(NamedTuple):
    first_name: str
    last_name: str
    email: str


SEED_AUTHORS: tuple[SeedAuthor, ...] = (
    SeedAuthor("Mahmud", "Ghali", "mahmud@example.com"),
    SeedAuthor("Haleem", "Tech", "haleem@example.com"),
    SeedAuthor("Fatima", "Gee", "fatima.eng@example.com"),
)

SEED_POSTS: tuple[PostCreate, ...] = (
    PostCreate(
        title="Building RESTful APIs with FastAPI",
        description="A comprehensive guide to building scalable RESTful APIs using FastAPI",
        body=(
            "FastAPI is a modern, fast web framework for building APIs with Python "
            "based on standard type hints.\n\nKey advantages of FastAPI:\n"
            "- Automatic API documentation\n- Built-in data validation\n"
            "- High performance\n- Easy deployment"
        ),
        tags=["Python", "FastAPI", "Backend", "REST API"],
        state=PostState.PUBLISHED,
    ),
    PostCreate(
        title="Database Optimization: Indexes and Query Performance",
        description="Making your database queries faster",
        body=(
            "Database performance is critical for application speed. Learn indexing "
            "strategies and query optimization.\n\nTopics:\n- B-tree indexes\n"
            "- Query execution plans\n- Slow query logs\n- Denormalization vs normalization"
        ),
        tags=["Database", "Performance", "Optimization", "SQL"],
        state=PostState.PUBLISHED,
    ),
    PostCreate(
        title="API Security Best Practices",
        description="Protecting your APIs from common attacks",
        body=(
            "API security is paramount. Learn about authentication, authorization, "
            "and protection against common vulnerabilities.\n\nSecurity measures:\n"
            "1. JWT and OAuth2\n2. Rate limiting\n3. Input validation\n"
            "4. CORS configuration\n5. SQL injection prevention"
        ),
        tags=["Security", "API", "Authentication", "Best Practices"],
        state=PostState.PUBLISHED,
    ),
    PostCreate(
        title="Docker & Containerization for Developers",
        description="Containerizing your applications effectively",
        body=(
            "Docker makes deployment consistent across environments.\n\nCovered:\n"
            "- Dockerfile creation\n- Image optimization\n- Docker Compose\n"
            "- Container networking"
        ),
        tags=["Docker", "Containers", "DevOps", "Deployment"],
        state=PostState.DRAFT,
    ),
    PostCreate(
        title="The Future of AI in Software Development",
        description="How AI is transforming software engineering",
        body=(
            "AI and LLMs are changing how we write code.\n\nTopics:\n"
            "- Code generation\n- Automated testing\n- Bug detection\n"
            "- Documentation\n- Ethics and responsibility"
        ),
        tags=["AI", "LLM", "Future", "Software Development"],
        state=PostState.PUBLISHED,
    ),
    PostCreate(
        title="Remote Work as a Software Engineer: Pros and Cons",
        description="Perspectives on remote vs office work",
        body=(
            "Remote work has transformed the tech industry.\n\nBenefits:\n"
            "- Flexibility\n- Work-life balance\n\nChallenges:\n"
            "- Communication\n- Team building"
        ),
        tags=["Remote Work", "Career"],
        state=PostState.DRAFT,
    ),
)


@dataclass
class SeedResult:
    users_created: int = 0
    posts_created: int = 0


async def _ensure_author(repo: UserRepository, author: SeedAuthor) -> tuple[UserDB, bool]:
    if existing := await repo.get_by_email(author.email):
        return existing, False
    user = UserCreate(
        first_name=author.first_name,
        last_name=author.last_name,
        email=author.email,
        password=SEED_PASSWORD,  # type: ignore[arg-type]
    )
    password_hash = await hash_password(SEED_PASSWORD)
    return await repo.create(user, password_hash), True


async def seed_database(session: AsyncSession) -> SeedResult:
    """
    Insert demo authors and posts that are not already present.

    Posts are assigned to authors round-robin.

    Args:
        session: Open session; the caller commits

    Returns:
        SeedResult: How many users and posts were created
    """
    result = SeedResult()
    user_repo = UserRepository(session)
    post_repo = PostRepository(session)

    authors: list[UserDB] = []
    for author in SEED_AUTHORS:
        user, created = await _ensure_author(user_repo, author)
        authors.append(user)
        result.users_created += created

    for index, post in enumerate(SEED_POSTS):
        if await post_repo.get_by_title(post.title):
            continue
        await post_repo.create(post, authors[index % len(authors)].id)
        result.posts_created += 1

    return result


async def main() -> None:
    """Create tables if needed and seed demo data."""
    configure_logging()
    await init_db()
    async with transaction() as session:
        result = await seed_database(session)
    logger.info(
        f"Seeding complete: {result.users_created} users and "
        f"{result.posts_created} posts created",
    )


if __name__ == "__main__":
    asyncio_run(main())
