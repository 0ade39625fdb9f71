"""CLI parameter validation and run configuration assembly."""

from ..core.config import get_env_config
from ..core.exceptions import ConfigError
from ..models.config import SUPPORTED_SCHEMES, EndpointDescriptor, RunConfig


def validate_scheme(scheme: str) -> str | None:
    """Return an error message if ``scheme`` is not http or https."""
    if scheme.lower() not in SUPPORTED_SCHEMES:
        return (
            f"Invalid HTTP scheme '{scheme}'. "
            f"Valid schemes: {', '.join(SUPPORTED_SCHEMES)}"
        )
    return None


def validate_port(port: str) -> str | None:
    """Return an error message if ``port`` is not a TCP port number."""
    if not port.isdigit() or not 0 < int(port) < 65536:
        return f"Invalid port '{port}'. Port must be a number between 1 and 65535"
    return None


def validate_host(host: str) -> str | None:
    """Return an error message if ``host`` carries a scheme or path."""
    if "://" in host:
        return (
            f"Invalid Mattermost URL '{host}'. "
            "Supply the host name without the HTTP scheme"
        )
    if "/" in host:
        return f"Invalid Mattermost URL '{host}'. Supply the host name without a path"
    return None


def validate_connection_parameters(
    url: str, port: str, scheme: str, token: str
) -> list[str]:
    """Check the Mattermost connection settings.

    Args:
        url: Mattermost host name
        port: TCP port
        scheme: HTTP scheme
        token: Personal access or bot token

    Returns:
        list[str]: Error messages; empty when everything is valid
    """
    errors = []

    if not url:
        errors.append(
            "The Mattermost URL must be supplied either on the command line "
            "or via the MM_URL environment variable"
        )
    elif error := validate_host(url):
        errors.append(error)

    if not scheme:
        errors.append(
            "The Mattermost HTTP scheme must be supplied either on the command "
            "line or via the MM_SCHEME environment variable"
        )
    elif error := validate_scheme(scheme):
        errors.append(error)

    if not port:
        errors.append(
            "The Mattermost port must be supplied either on the command line "
            "or via the MM_PORT environment variable"
        )
    elif error := validate_port(port):
        errors.append(error)

    if not token:
        errors.append(
            "The Mattermost auth token must be supplied either on the command "
            "line or via the MM_TOKEN environment variable"
        )

    return errors


def validate_file_parameters(
    input_file: str, output_file: str, column: str
) -> list[str]:
    """Check the CSV file and column parameters.

    Returns:
        list[str]: Error messages; empty when everything is valid
    """
    errors = []
    if not input_file:
        errors.append("The CSV input file must be supplied as a command line parameter")
    if not output_file:
        errors.append(
            "The CSV output file must be supplied as a command line parameter"
        )
    if not column:
        errors.append(
            "The user ID column name from the CSV must be supplied as a "
            "command line parameter"
        )
    return errors


def resolve_connection_settings(
    url: str | None,
    port: str | None,
    scheme: str | None,
    token: str | None,
) -> dict[str, str]:
    """Merge command line values over environment values.

    Returns:
        dict[str, str]: Keys ``url``, ``port``, ``scheme`` and ``token``
    """
    env_config = get_env_config()
    return {
        "url": (url or str(env_config["url"])).strip(),
        "port": (port or str(env_config["port"])).strip(),
        "scheme": (scheme or str(env_config["scheme"])).strip().lower(),
        "token": (token or str(env_config["token"])).strip(),
    }


def _raise_if_errors(errors: list[str]) -> None:
    if errors:
        raise ConfigError("Invalid configuration", details="; ".join(errors))


def build_endpoint(
    url: str | None,
    port: str | None,
    scheme: str | None,
    token: str | None,
) -> EndpointDescriptor:
    """Build a validated EndpointDescriptor from CLI values and the environment.

    Raises:
        ConfigError: If any connection setting is missing or invalid
    """
    settings = resolve_connection_settings(url, port, scheme, token)
    _raise_if_errors(
        validate_connection_parameters(
            settings["url"], settings["port"], settings["scheme"], settings["token"]
        )
    )
    return EndpointDescriptor(
        scheme=settings["scheme"],
        host=settings["url"],
        port=settings["port"],
        token=settings["token"],
    )


def build_run_config(
    url: str | None,
    port: str | None,
    scheme: str | None,
    token: str | None,
    input_file: str | None,
    output_file: str | None,
    column: str | None,
    fullname: bool = False,
    debug: bool = False,
) -> RunConfig:
    """Assemble a validated RunConfig from CLI values and the environment.

    All problems are collected before raising so the user sees every
    missing parameter in one go.

    Raises:
        ConfigError: With every problem found listed in ``details``
    """
    settings = resolve_connection_settings(url, port, scheme, token)
    input_file = (input_file or "").strip()
    output_file = (output_file or "").strip()
    column = column or ""

    _raise_if_errors(
        validate_connection_parameters(
            settings["url"], settings["port"], settings["scheme"], settings["token"]
        )
        + validate_file_parameters(input_file, output_file, column)
    )

    endpoint = EndpointDescriptor(
        scheme=settings["scheme"],
        host=settings["url"],
        port=settings["port"],
        token=settings["token"],
    )
    return RunConfig(
        endpoint=endpoint,
        input_file=input_file,
        output_file=output_file,
        column=column,
        fullname=fullname,
        debug=debug,
    )
