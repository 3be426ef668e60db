"""
Address and prefix utilities for the static router.

Conversion between dotted-decimal text and 32-bit integers, prefix masking,
and the validation helpers built on top of them. Out-of-range octets and
mask lengths are rejected rather than truncated.
"""

from jinja2 import Environment, TemplateSyntaxError, meta

from .constants import OCTET_COUNT, OCTET_MAX, MASK_LENGTH_MAX, ADDRESS_MAX


class MalformedInputError(ValueError):
    """Raised when an address, prefix length or table line cannot be parsed."""
    pass


def _parse_decimal(token: str, what: str) -> int:
    """Parse an unsigned ASCII decimal token."""
    if not token or not (token.isascii() and token.isdigit()):
        raise MalformedInputError(f"{what} '{token}' is not a decimal number")
    return int(token)


def parse_address(text: str) -> int:
    """
    Parse a dotted-decimal IPv4 address into a 32-bit integer.

    The first octet lands in the most significant byte:
    (o1 << 24) | (o2 << 16) | (o3 << 8) | o4.

    Raises:
        MalformedInputError: if the text is not four decimal octets in 0..255
    """
    text = text.strip()
    octets = text.split(".")
    if len(octets) != OCTET_COUNT:
        raise MalformedInputError(f"'{text}' is not a dotted-decimal IPv4 address")

    addr = 0
    for token in octets:
        value = _parse_decimal(token, "Octet")
        if value > OCTET_MAX:
            raise MalformedInputError(f"Octet {value} in '{text}' is out of range 0-{OCTET_MAX}")
        addr = (addr << 8) | value
    return addr


def format_address(addr: int) -> str:
    """Render a 32-bit integer as a dotted-decimal IPv4 address."""
    return ".".join(str((addr >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def validate_mask_length(mask_length: int) -> int:
    """Check a prefix length is within 0..32 and return it."""
    if isinstance(mask_length, bool) or not isinstance(mask_length, int):
        raise MalformedInputError(f"Mask length {mask_length!r} is not an integer")
    if not 0 <= mask_length <= MASK_LENGTH_MAX:
        raise MalformedInputError(f"Mask length {mask_length} is out of range 0-{MASK_LENGTH_MAX}")
    return mask_length


def parse_mask_length(text: str) -> int:
    """Parse a decimal prefix length."""
    return validate_mask_length(_parse_decimal(text.strip(), "Mask length"))


def apply_mask(addr: int, mask_length: int) -> int:
    """
    Clear every bit of addr below the top mask_length bits.

    A zero-length mask matches everything and always yields 0.
    """
    validate_mask_length(mask_length)
    if mask_length == 0:
        return 0
    mask = (ADDRESS_MAX << (MASK_LENGTH_MAX - mask_length)) & ADDRESS_MAX
    return addr & mask


def parse_prefix(text: str) -> tuple[int, int]:
    """Parse 'a.b.c.d/len' into (address, mask_length) without masking."""
    parts = text.strip().split("/")
    if len(parts) != 2:
        raise MalformedInputError(f"'{text}' is not in address/length form")
    return parse_address(parts[0]), parse_mask_length(parts[1])


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        parse_address(ip)
        return True
    except MalformedInputError:
        return False


# =============================================================================
# Options Validation
# =============================================================================

class OptionsValidationError(Exception):
    """Raised when an options file fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


OPTION_KEYS = ['check_direct_attachment', 'debug_level', 'workers', 'messages']
MESSAGE_KEYS = ['delivered', 'forwarded', 'no_route', 'bad_next_hop', 'malformed']
TEMPLATE_VARIABLES = ['text', 'outcome', 'destination', 'interface', 'next_hop', 'route', 'error']


def validate_options(data: dict) -> list[str]:
    """
    Validate an options structure as read from YAML.
    Returns list of error messages (empty if valid).
    """
    if not isinstance(data, dict):
        return ["Options must be a mapping"]

    errors = []

    for key in data:
        if key not in OPTION_KEYS:
            errors.append(f"Unknown option: {key}")

    check = data.get('check_direct_attachment')
    if check is not None and not isinstance(check, bool):
        errors.append("check_direct_attachment must be a boolean")

    for key, lowest, highest in (('debug_level', 0, 4), ('workers', 1, None)):
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"{key} must be an integer")
        elif value < lowest or (highest is not None and value > highest):
            bound = f"{lowest}-{highest}" if highest is not None else f">= {lowest}"
            errors.append(f"{key} must be {bound}, got {value}")

    messages = data.get('messages')
    if messages is not None:
        if not isinstance(messages, dict):
            errors.append("messages must be a mapping")
        else:
            env = Environment()
            for name, template in messages.items():
                if name not in MESSAGE_KEYS:
                    errors.append(f"messages.{name}: unknown message")
                    continue
                if not isinstance(template, str):
                    errors.append(f"messages.{name} must be a string")
                    continue
                try:
                    ast = env.parse(template)
                except TemplateSyntaxError as e:
                    errors.append(f"Jinja2 template syntax error in messages.{name}: {e}")
                    continue
                unknown = sorted(meta.find_undeclared_variables(ast) - set(TEMPLATE_VARIABLES))
                if unknown:
                    errors.append(f"messages.{name}: unknown variable(s) {', '.join(unknown)}")

    return errors
