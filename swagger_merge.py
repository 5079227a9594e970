"""
Adds or updates path/method operations in a Swagger document
"""

import logging

from swagger_model import Document, MediaType, Operation, Response, Schema

logger = logging.getLogger(__name__)

# ================= CONFIG =================

SUCCESS_STATUS = "200"
SUCCESS_DESCRIPTION = "Successful response"
JSON_MEDIA_TYPE = "application/json"

SAMPLE_SUMMARY_PREFIX = "Sample operation for "
SAMPLE_DESCRIPTION = "This is a sample description for the new operation."


def success_response(schema: Schema) -> Response:
    """200 response carrying `schema` as its JSON body"""
    return Response(
        description=SUCCESS_DESCRIPTION,
        content={JSON_MEDIA_TYPE: MediaType(schema=schema)},
    )


def new_operation(path: str, schema: Schema) -> Operation:
    return Operation(
        summary=SAMPLE_SUMMARY_PREFIX + path,
        description=SAMPLE_DESCRIPTION,
        responses={SUCCESS_STATUS: success_response(schema)},
    )


def apply_operation(doc: Document, path: str, method: str, schema: Schema) -> Document:
    """
    Upsert the operation for (path, method) and return the same document.

    A new operation gets a sample summary/description and a single 200
    response. For an existing one only the 200 response is replaced; its
    summary, description and other response codes are kept.
    """
    # Containers are reassigned, not mutated, so they count as set when the
    # document is written with only its set fields
    paths = dict(doc.paths)
    methods = dict(paths.get(path, {}))

    existing = methods.get(method)
    if existing is None:
        logger.debug(f"Creating operation {method} {path}")
        methods[method] = new_operation(path, schema)
    else:
        logger.debug(f"Replacing {SUCCESS_STATUS} response of {method} {path}")
        existing.responses = {**existing.responses, SUCCESS_STATUS: success_response(schema)}

    paths[path] = methods
    doc.paths = paths
    return doc
