"""
Database initialization and seed data.

This module provides functions to initialize the database schema and
populate it with the roles, users and movies the application starts with.
"""

import logging
from typing import Optional

from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from dsmovie.database.connection import DatabaseManager, get_db_manager, DEFAULT_DB_PATH
from dsmovie.database.models import Movie, Role, User

logger = logging.getLogger(__name__)

ROLE_CLIENT = "ROLE_CLIENT"
ROLE_ADMIN = "ROLE_ADMIN"

DEFAULT_PASSWORD = "123456"

SEED_USERS = [
    ("maria@gmail.com", [ROLE_CLIENT]),
    ("alex@gmail.com", [ROLE_CLIENT, ROLE_ADMIN]),
]

SEED_MOVIES = [
    ("The Witcher", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/jBJWaqoSCiARWtfV0GlqHrcdidd.jpg"),
    ("Venom: Tempo de Carnificina", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/vIgyYkXkg6NC2whRbYjBD7eb3Er.jpg"),
    ("O Espetacular Homem-Aranha 2: A Ameaça de Electro", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/u7SeO6Y42P7VCTWLhpnL96cyOqd.jpg"),
    ("Matrix Resurrections", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/hv7o3VgfsairBoQFAawgaQ4cR1m.jpg"),
    ("Shang-Chi e a Lenda dos Dez Anéis", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/cinER0ESG0eJ49kXlExM0MEWGxW.jpg"),
    ("Django Livre", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/2oZklIzUbvZXXzIFzv7Hi68d6xf.jpg"),
    ("Titanic", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/yDI6D5ZQh67YU4r2ms8qcSbAviZ.jpg"),
    ("O Lobo de Wall Street", "https://www.themoviedb.org/t/p/w533_and_h300_bestv2/qjGrUmKW78MCFG8PTLDBp67S27p.jpg"),
]


def seed_database(session: Session) -> None:
    """
    Insert roles, users and movies into an empty database.

    Does nothing if the database already contains users.

    Args:
        session: Database session
    """
    if session.scalar(select(func.count(User.id))):
        logger.info("Database already seeded, skipping")
        return

    roles = {authority: Role(authority=authority) for authority in (ROLE_CLIENT, ROLE_ADMIN)}
    session.add_all(roles.values())

    password_hash = generate_password_hash(DEFAULT_PASSWORD)
    for username, authorities in SEED_USERS:
        session.add(User(
            username=username,
            password=password_hash,
            roles=[roles[authority] for authority in authorities],
        ))

    for title, image in SEED_MOVIES:
        session.add(Movie(title=title, score=0.0, count=0, image=image))

    session.flush()
    logger.info("Seeded %d users and %d movies", len(SEED_USERS), len(SEED_MOVIES))


def init_database(
    db_path: str = DEFAULT_DB_PATH,
    reset: bool = False,
    seed: bool = False,
    db_manager: Optional[DatabaseManager] = None,
) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        seed: If True, load seed data into an empty database
        db_manager: Manager to use instead of the global one

    Returns:
        DatabaseManager instance
    """
    db_manager = db_manager or get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables created")

    if seed:
        with db_manager.session_scope() as session:
            seed_database(session)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    expected_tables = {'movies', 'scores', 'users', 'roles', 'user_role'}

    missing_tables = expected_tables - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False

    logger.info("All tables exist: %s", existing_tables)
    return True
