"""
router_lib.config - Address utilities, table entries and options.

This package contains:
- validation: Address parsing/formatting, masking and options validation
- dataclasses: Interface, Route, RouterOptions, MessageTemplates
- constants: Address limits and default paths
- serialization: YAML options and JSON table snapshots
"""

from .constants import (
    MASK_LENGTH_MAX,
    COMMENT_PREFIX,
    HISTORY_FILE,
)

from .validation import (
    MalformedInputError,
    OptionsValidationError,
    parse_address,
    format_address,
    apply_mask,
    validate_mask_length,
    parse_mask_length,
    parse_prefix,
    validate_ipv4,
    validate_options,
    TEMPLATE_VARIABLES,
)

from .dataclasses import (
    Interface,
    Route,
    MessageTemplates,
    RouterOptions,
)

from .serialization import (
    to_dict,
    options_from_dict,
    load_options,
    save_options,
    tables_to_dict,
    save_tables,
)

__all__ = [
    # Constants
    'MASK_LENGTH_MAX',
    'COMMENT_PREFIX',
    'HISTORY_FILE',
    # Validation
    'MalformedInputError',
    'OptionsValidationError',
    'parse_address',
    'format_address',
    'apply_mask',
    'validate_mask_length',
    'parse_mask_length',
    'parse_prefix',
    'validate_ipv4',
    'validate_options',
    'TEMPLATE_VARIABLES',
    # Dataclasses
    'Interface',
    'Route',
    'MessageTemplates',
    'RouterOptions',
    # Serialization
    'to_dict',
    'options_from_dict',
    'load_options',
    'save_options',
    'tables_to_dict',
    'save_tables',
]
