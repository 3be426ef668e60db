"""
Configuration serialization for the static router.

Options are kept in YAML; table snapshots are written as JSON.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import yaml

from .dataclasses import Interface, Route, RouterOptions, MessageTemplates
from .validation import OptionsValidationError, validate_options, format_address


def to_dict(obj):
    """Convert dataclasses to dicts recursively."""
    if hasattr(obj, '__dataclass_fields__'):
        return {k: to_dict(v) for k, v in asdict(obj).items()}
    elif isinstance(obj, (list, tuple)):
        return [to_dict(i) for i in obj]
    else:
        return obj


def options_from_dict(data: Optional[dict]) -> RouterOptions:
    """Build RouterOptions from a validated mapping, filling defaults."""
    data = data or {}
    errors = validate_options(data)
    if errors:
        raise OptionsValidationError(errors)

    defaults = RouterOptions()
    messages = MessageTemplates(**(data.get('messages') or {}))
    return RouterOptions(
        check_direct_attachment=data.get('check_direct_attachment', defaults.check_direct_attachment),
        debug_level=data.get('debug_level', defaults.debug_level),
        workers=data.get('workers', defaults.workers),
        messages=messages,
    )


def load_options(options_file: Path) -> RouterOptions:
    """
    Load router options from a YAML file.

    Raises:
        OptionsValidationError: if the file is not valid YAML or fails validation
    """
    with open(options_file) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise OptionsValidationError([f"Invalid YAML in {options_file}: {e}"]) from e

    return options_from_dict(data)


def save_options(options: RouterOptions, options_file: Path) -> None:
    """Save router options to a YAML file."""
    options_file.parent.mkdir(parents=True, exist_ok=True)

    with open(options_file, 'w') as f:
        yaml.safe_dump(to_dict(options), f, default_flow_style=False, sort_keys=False)


def tables_to_dict(interfaces, routes) -> dict:
    """Snapshot loaded tables with addresses rendered as dotted-decimal text."""
    return {
        'interfaces': [
            {
                'name': iface.name,
                'address': format_address(iface.address),
                'mask_length': iface.mask_length,
                'network': format_address(iface.network),
            }
            for iface in interfaces
        ],
        'routes': [
            {
                'network': format_address(route.network),
                'mask_length': route.mask_length,
                'next_hop': format_address(route.next_hop),
            }
            for route in routes
        ],
    }


def save_tables(tables_file: Path, interfaces, routes) -> None:
    """Write a JSON snapshot of the loaded tables."""
    tables_file.parent.mkdir(parents=True, exist_ok=True)

    with open(tables_file, 'w') as f:
        json.dump(tables_to_dict(interfaces, routes), f, indent=2)
