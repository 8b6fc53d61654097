"""Document editing exports."""

from .document_editor import insert_operation, insert_schema
from .interactive_session import (
    ClickInputProvider,
    InputProvider,
    gather_operation_draft,
    run_insert_session,
)
from .operation_models import (
    EditorInputError,
    HttpMethod,
    InsertionReport,
    OperationDraft,
    OperationParameter,
    ParameterLocation,
)
from .url_parsing import build_parameters, normalize_url, path_parameter_names, split_query

__all__ = [
    "ClickInputProvider",
    "EditorInputError",
    "HttpMethod",
    "InputProvider",
    "InsertionReport",
    "OperationDraft",
    "OperationParameter",
    "ParameterLocation",
    "build_parameters",
    "gather_operation_draft",
    "insert_operation",
    "insert_schema",
    "normalize_url",
    "path_parameter_names",
    "run_insert_session",
    "split_query",
]
