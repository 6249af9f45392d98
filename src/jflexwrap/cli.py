"""CLI wrapper for the JFlex launcher script."""

import shlex
import subprocess
from pathlib import Path

from loguru import logger

from jflexwrap.config import (
    OPTION_SKEL,
    JFlexSettings,
    has_option,
    is_windows,
    validate_configuration,
)
from jflexwrap.evaluator import evaluate_output
from jflexwrap.exceptions import (
    CliNotFoundError,
    ConfigurationError,
    InvocationTimeoutError,
)
from jflexwrap.models import InvocationResult, ValidationStatus

OPTION_D = "-d"
OPTION_QUIET = "--quiet"
OPTION_Q = "-q"

CMD_EXE = ["cmd.exe", "/C"]


def find_cli(settings: JFlexSettings, windows: bool | None = None) -> Path:
    """Find the JFlex launcher script and check the settings around it.

    Returns:
        Path to ``jflex.sh`` or ``jflex.bat`` under the JFlex home.

    Raises:
        CliNotFoundError: If the home directory or launcher is missing.
        ConfigurationError: If the configured skeleton file is missing.
    """
    status = validate_configuration(settings, windows)
    if status is ValidationStatus.HOME_INVALID:
        raise CliNotFoundError(f"JFlex home path is invalid: {settings.home}")
    if status is ValidationStatus.SKELETON_MISSING:
        raise ConfigurationError(
            f"JFlex skeleton file was not found: {settings.skeleton_path}",
            status=status,
        )
    return settings.launcher(windows)


def build_command(
    path: str | Path,
    settings: JFlexSettings,
    windows: bool | None = None,
) -> list[str]:
    """Assemble the JFlex command line for one grammar file.

    Args:
        path: Grammar file to generate a lexer from.
        settings: JFlex settings.
        windows: Override platform detection.

    Returns:
        Command as a list of arguments. The lexer is written next to the
        grammar file unless the options already say otherwise.
    """
    if windows is None:
        windows = is_windows()
    input_path = Path(path).resolve()

    cmd = list(CMD_EXE) if windows else []
    cmd.append(str(settings.launcher(windows)))

    if settings.options.strip():
        cmd.extend(shlex.split(settings.options, posix=not windows))

    if settings.uses_skeleton(windows):
        cmd.extend([OPTION_SKEL, str(settings.skeleton_path)])

    if not has_option(settings.options, OPTION_Q, OPTION_QUIET, posix=not windows):
        cmd.append(OPTION_QUIET)

    cmd.extend([OPTION_D, str(input_path.parent)])
    cmd.append(str(input_path))
    return cmd


def _run_cli(
    cmd: list[str],
    settings: JFlexSettings,
    *,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run JFlex and collect both output streams.

    Raises:
        CliNotFoundError: If the launcher cannot be executed.
        InvocationTimeoutError: If JFlex runs longer than ``timeout``.
    """
    logger.debug(f"Running JFlex: {shlex.join(cmd)}")
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
            cwd=settings.bin_dir,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise InvocationTimeoutError(shlex.join(cmd), timeout) from e
    except OSError as e:
        raise CliNotFoundError(f"Failed to execute JFlex: {e}") from e


def generate(
    path: str | Path,
    settings: JFlexSettings | None = None,
    *,
    timeout: float | None = None,
) -> InvocationResult:
    """Generate a lexer from a JFlex grammar file.

    Args:
        path: Path to the ``.flex`` grammar file.
        settings: JFlex settings (read from the environment if None).
        timeout: Seconds to wait before killing JFlex.

    Returns:
        InvocationResult with informational and error messages. Grammar
        errors reported by JFlex do not raise; check ``result.errors``.

    Raises:
        FileNotFoundError: If the grammar file doesn't exist.
        ConfigurationError: If the settings are incomplete.
        CliNotFoundError: If the JFlex launcher is not found.
        InvocationTimeoutError: If JFlex runs longer than ``timeout``.
        UnexplainedFailureError: If JFlex fails without reporting an error.
    """
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input path does not exist: {path}")

    if settings is None:
        settings = JFlexSettings.from_env()

    find_cli(settings)
    cmd = build_command(input_path, settings)
    result = _run_cli(cmd, settings, timeout=timeout)
    return evaluate_output(result.stdout, result.stderr, result.returncode, cmd)
