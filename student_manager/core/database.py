from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def _engine_options() -> dict:
    """
    Engine keyword arguments for the configured database.

    SQLite connections are shared across the request threads, and the
    in-memory database lives on a single static connection.
    """
    if settings.is_sqlite:
        options = {
            "connect_args": {"check_same_thread": False},
        }
        if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        "pool_pre_ping": True,

        "connect_args": {
            "connect_timeout": 10,
        },
    }


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO_SQL,
    **_engine_options()
)


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables():
    """
    Create all database tables defined in models.

    Tables that already exist are left untouched.
    """
    # Register the models on Base.metadata
    from student_manager.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


def drop_database_tables():
    """
    Drop all database tables.

    This deletes all data. Only used by tests.
    """
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
    logger.info("Database connection successful")
    return True


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    if settings.DEBUG:
        logger.debug("New database connection established")


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        raise RuntimeError("Cannot connect to database!")

    if settings.DB_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized successfully")
