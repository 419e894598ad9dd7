"""Database models."""

from sqlalchemy import MetaData

from kontactshare.models import admins as _admins_module
from kontactshare.models import profiles as _profiles_module
from kontactshare.models.admins import admins
from kontactshare.models.profiles import profiles

# Combined metadata for create_all
metadata = MetaData()
for _source in (_admins_module.metadata, _profiles_module.metadata):
    for _table in _source.tables.values():
        _table.to_metadata(metadata)

__all__ = [
    "admins",
    "metadata",
    "profiles",
]
