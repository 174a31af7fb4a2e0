"""PyAlembic binding helpers."""

from __future__ import annotations

import logging
import os

from .exceptions import AlembicBindingsNotAvailableError, ArchiveUnavailableError

logger = logging.getLogger(__name__)


def import_alembic_module():
    """Import the ``Abc`` and ``AbcGeom`` modules of the PyAlembic bindings.

    Encapsulates the import so code can provide a helpful error when it is
    missing instead of failing at module import time.
    """

    try:
        from alembic import Abc, AbcGeom  # type: ignore
    except ImportError as exc:  # pragma: no cover - dependent on external SDK
        raise AlembicBindingsNotAvailableError(
            "PyAlembic bindings are not available. "
            "Build Alembic with Python support and ensure the 'alembic' module "
            "(providing Abc and AbcGeom) is on PYTHONPATH."
        ) from exc

    return Abc, AbcGeom


def open_archive(path: str):
    """Open the Alembic archive located at ``path`` for reading."""

    if not os.path.isfile(path):
        raise ArchiveUnavailableError(f"Archive '{path}' does not exist.")

    Abc, _ = import_alembic_module()
    try:
        archive = Abc.IArchive(path)
    except RuntimeError as exc:
        raise ArchiveUnavailableError(f"Failed to open Alembic archive '{path}': {exc}") from exc

    if not archive.valid():
        raise ArchiveUnavailableError(f"Alembic archive '{path}' is not valid.")

    logger.debug("Opened archive %s", path)
    return archive


def wrap_existing(schema_class, obj):
    """Wrap ``obj`` as an instance of the typed ``schema_class`` (e.g. ``IPolyMesh``)."""

    Abc, _ = import_alembic_module()
    return schema_class(obj, Abc.WrapExistingFlag.kWrapExisting)


def sample_selector(index: int):
    """Return an ``ISampleSelector`` for the sample at ``index``."""

    Abc, _ = import_alembic_module()
    return Abc.ISampleSelector(index)
