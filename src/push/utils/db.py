from protean.domain import Domain
from sqlalchemy import create_engine


def _is_rdbms(provider) -> bool:
    return provider.conn_info["provider"] in ("sqlite", "postgresql")


def setup_db(domain: Domain):
    """Create tables for push aggregates on RDBMS providers"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if not _is_rdbms(provider):
                continue

            engine = create_engine(provider.conn_info["database_uri"])

            # Accessing the repository's _dao registers the aggregate's
            #   model with SQLAlchemy metadata before create_all runs.
            for _, aggregate_record in domain.registry.aggregates.items():
                if aggregate_record.cls.meta_.provider == provider.name:
                    domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop push tables on RDBMS providers"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if _is_rdbms(provider):
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)
