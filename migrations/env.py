# migrations/env.py
from alembic import context
from sqlalchemy import engine_from_config, pool

from blog_api.db.base import Base
from blog_api.db.session import SQLALCHEMY_DATABASE_URL
import blog_api.models  # noqa: F401  registra as tabelas no metadata

config = context.config

# Alembic usa a mesma URL (já normalizada) da aplicação; '%' escapado p/ o configparser
config.set_main_option("sqlalchemy.url", SQLALCHEMY_DATABASE_URL.replace("%", "%%"))

target_metadata = Base.metadata


def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config(config.get_section(config.config_ini_section), prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=connection.dialect.name == "sqlite")
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
