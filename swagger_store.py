"""
Reads and writes Swagger YAML files
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

import yaml
from pydantic import ValidationError

from swagger_errors import DecodeError, FileError
from swagger_model import Document

logger = logging.getLogger(__name__)

NEW_FILE_MODE = 0o644


def _reason(e: OSError) -> str:
    return e.strerror or str(e)


def read_text(path: str) -> str:
    """Raw file content"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise FileError(path, _reason(e)) from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"{path}: not a UTF-8 text file") from e


def read_document(path: str) -> Document:
    """Load and decode a Swagger YAML file"""
    text = read_text(path)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DecodeError(f"{path}: invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DecodeError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")

    try:
        doc = Document.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"{path}: unexpected document structure: {e}") from e

    logger.info(f"Loaded {path} ({len(doc.paths)} paths)")
    return doc


def dump_document(doc: Document) -> str:
    return yaml.safe_dump(
        doc.to_dict(),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_document(path: str, doc: Document) -> None:
    """
    Encode `doc` and replace the file at `path`.

    The content goes to a temporary file next to the target first, so a
    failed write leaves the previous file as it was.
    """
    data = dump_document(doc)
    # Edit the file a symlink points to, not the link
    target = Path(path).resolve()

    try:
        mode = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        mode = NEW_FILE_MODE
    except OSError as e:
        raise FileError(path, _reason(e)) from e
    else:
        # os.replace only needs a writable directory
        if not os.access(target, os.W_OK):
            raise FileError(path, "Permission denied")

    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(data)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileError(path, _reason(e)) from e

    logger.info(f"Wrote {path}")
