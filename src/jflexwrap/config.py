"""JFlex installation settings and their validation."""

import os
import shlex
import sys
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from jflexwrap.exceptions import ConfigurationError
from jflexwrap.models import ValidationStatus

BIN_DIRECTORY = "bin"
JFLEX_BAT = "jflex.bat"
JFLEX_SH = "jflex.sh"

OPTION_SKEL = "--skel"


def is_windows() -> bool:
    return sys.platform == "win32"


def launcher_name(windows: bool | None = None) -> str:
    """Return the launcher script name shipped in ``<home>/bin``."""
    if windows is None:
        windows = is_windows()
    return JFLEX_BAT if windows else JFLEX_SH


def has_option(options: str, *flags: str, posix: bool = True) -> bool:
    """Check whether any of ``flags`` appears as a token in ``options``.

    ``posix`` selects the same quoting rules used to split the options into
    the command line.
    """
    try:
        tokens = shlex.split(options, posix=posix)
    except ValueError:
        tokens = options.split()
    return any(flag in tokens for flag in flags)


@dataclass(frozen=True)
class JFlexSettings:
    """Where JFlex is installed and how to call it.

    Relative paths are made absolute against the current directory when the
    settings are created, since JFlex itself runs inside ``<home>/bin``.

    Attributes:
        home: JFlex installation directory, containing ``bin/``.
        skeleton_path: Optional skeleton file passed with ``--skel``.
        options: Extra command-line options, as a shell-style string.
    """

    home: Path
    skeleton_path: Path | None = None
    options: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "home", Path(self.home).absolute())
        if self.skeleton_path is not None:
            object.__setattr__(
                self, "skeleton_path", Path(self.skeleton_path).absolute()
            )

    @classmethod
    def from_env(cls) -> "JFlexSettings":
        """Build settings from JFLEX_HOME, JFLEX_SKELETON and JFLEX_OPTIONS.

        Raises:
            ConfigurationError: If JFLEX_HOME is not set.
        """
        home = os.environ.get("JFLEX_HOME")
        if not home:
            raise ConfigurationError(
                "JFLEX_HOME is not set", status=ValidationStatus.HOME_INVALID
            )
        skeleton = os.environ.get("JFLEX_SKELETON")
        return cls(
            home=Path(home),
            skeleton_path=Path(skeleton) if skeleton else None,
            options=os.environ.get("JFLEX_OPTIONS", ""),
        )

    @property
    def bin_dir(self) -> Path:
        return self.home / BIN_DIRECTORY

    def launcher(self, windows: bool | None = None) -> Path:
        return self.bin_dir / launcher_name(windows)

    def uses_skeleton(self, windows: bool | None = None) -> bool:
        """True if the configured skeleton has to be passed explicitly."""
        if windows is None:
            windows = is_windows()
        return self.skeleton_path is not None and not has_option(
            self.options, OPTION_SKEL, posix=not windows
        )


def validate_configuration(
    settings: JFlexSettings, windows: bool | None = None
) -> ValidationStatus:
    """Check that the JFlex home and the skeleton file exist.

    Args:
        settings: Settings to check.
        windows: Override platform detection for the launcher name.

    Returns:
        HOME_INVALID if the home, its ``bin`` directory or the launcher is
        missing; SKELETON_MISSING if the configured skeleton file is missing;
        OK otherwise.
    """
    if not settings.home.is_dir() or not settings.bin_dir.is_dir():
        logger.warning(f"JFlex home path is invalid: {settings.home}")
        return ValidationStatus.HOME_INVALID

    launcher = settings.launcher(windows)
    if not launcher.is_file():
        logger.warning(f"JFlex launcher not found: {launcher}")
        return ValidationStatus.HOME_INVALID

    if settings.uses_skeleton(windows) and not settings.skeleton_path.is_file():
        logger.warning(f"JFlex skeleton file was not found: {settings.skeleton_path}")
        return ValidationStatus.SKELETON_MISSING

    return ValidationStatus.OK
