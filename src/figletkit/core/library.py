"""Font collections on disk and bundled with the package.

This module enumerates FIGlet font files, loads them in bulk and picks
fonts at random. Each file is parsed independently, so bulk loads can run
on a thread pool; results are always returned sorted by path.

Key components:
- iter_font_paths: Find font files under a directory
- FontLibrary: Load every font in a directory, pick one at random
- Bundled fonts: Fonts shipped inside figletkit.fonts
"""

import random
import time
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import partial
from importlib import resources
from pathlib import Path

import structlog

from figletkit.config import LibraryConfig, ParserConfig
from figletkit.core.builder import build_font
from figletkit.domain import FileContents, Font
from figletkit.exceptions import FigletKitError, ResourceNotFoundError
from figletkit.io.reader import FigletFileReader, read_figlet_bytes
from figletkit.utils import LoadLogger, LoadStats

logger = structlog.get_logger(__name__)

BUNDLED_FONTS_PACKAGE = "figletkit.fonts"


def iter_font_paths(directory: Path, suffix: str = ".flf") -> Iterator[Path]:
    """Yield font files under a directory, sorted, skipping hidden entries.

    Args:
        directory: Directory to search recursively
        suffix: File suffix identifying font files

    Yields:
        Paths of regular files with the suffix

    Raises:
        ResourceNotFoundError: If directory is not a directory
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ResourceNotFoundError(str(directory), "not a directory")

    for path in sorted(directory.rglob(f"*{suffix}")):
        relative = path.relative_to(directory)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file():
            yield path


class FontLibrary:
    """A directory of FIGlet fonts.

    Example:
        library = FontLibrary(Path("fonts"))
        fonts = library.load_all()
        font = library.random_font()
    """

    def __init__(
        self,
        directory: Path,
        parser_config: ParserConfig | None = None,
        library_config: LibraryConfig | None = None,
    ) -> None:
        """Initialize the library.

        Args:
            directory: Directory holding .flf files
            parser_config: Parser settings (defaults if None)
            library_config: Bulk loading settings (defaults if None)
        """
        self.directory = Path(directory)
        self.parser_config = parser_config or ParserConfig()
        self.library_config = library_config or LibraryConfig()
        self.load_logger = LoadLogger(logger)

    @property
    def stats(self) -> LoadStats:
        """Statistics from the most recent load_all call."""
        return self.load_logger.stats

    def font_paths(self) -> list[Path]:
        """List the font files in the directory."""
        return list(iter_font_paths(self.directory, self.parser_config.font_suffix))

    def _load_one(self, path: Path) -> Font:
        contents = FigletFileReader(path, encoding=self.parser_config.encoding).load()
        return build_font(contents, self.parser_config)

    def load_all(self, max_workers: int | None = None) -> list[Font]:
        """Load every font in the directory.

        Files that cannot be read or parsed are skipped and recorded in
        stats.

        Args:
            max_workers: Worker threads (None = config value, 1 = sequential)

        Returns:
            Loaded fonts sorted by file path

        Raises:
            ResourceNotFoundError: If the directory does not exist
        """
        if max_workers is None:
            max_workers = self.library_config.max_workers

        self.load_logger = LoadLogger(logger)
        stats = self.load_logger.stats
        stats.start_time = time.time()

        paths = self.font_paths()
        loaded: dict[Path, Font] = {}

        if max_workers == 1:
            for path in paths:
                self._collect(path, partial(self._load_one, path), loaded)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = {executor.submit(self._load_one, path): path for path in paths}
                for future in as_completed(futures):
                    self._collect(futures[future], future.result, loaded)

        stats.end_time = time.time()
        self.load_logger.log_summary(str(self.directory))
        return [loaded[path] for path in sorted(loaded)]

    def _collect(
        self, path: Path, load: Callable[[], Font], loaded: dict[Path, Font]
    ) -> None:
        try:
            font = load()
        except FigletKitError as e:
            self.load_logger.log_font_skipped(str(path), e)
            return
        loaded[path] = font
        self.load_logger.log_font_loaded(str(path), len(font))

    def random_font(self, rng: random.Random | None = None) -> Font | None:
        """Pick one loadable font at random.

        Args:
            rng: Random source (module-level random if None)

        Returns:
            A font, or None if no font in the directory loads
        """
        fonts = self.load_all()
        if not fonts:
            return None
        return (rng or random).choice(fonts)


def bundled_font_names() -> list[str]:
    """Names of the fonts shipped with figletkit, sorted."""
    return sorted(
        Path(entry.name).stem
        for entry in resources.files(BUNDLED_FONTS_PACKAGE).iterdir()
        if entry.is_file() and entry.name.endswith(".flf")
    )


def read_bundled_contents(name: str, encoding: str = "utf-8") -> FileContents:
    """Read and parse a bundled font file without building glyphs.

    Args:
        name: Font name without suffix
        encoding: Text encoding of the file

    Returns:
        Parsed FileContents

    Raises:
        ResourceNotFoundError: If no bundled font has that name
    """
    resource = resources.files(BUNDLED_FONTS_PACKAGE) / f"{name}.flf"
    if not resource.is_file():
        raise ResourceNotFoundError(f"{BUNDLED_FONTS_PACKAGE}/{name}.flf", "no such bundled font")
    return read_figlet_bytes(resource.read_bytes(), f"{name}.flf", encoding)


def load_bundled_font(name: str, config: ParserConfig | None = None) -> Font:
    """Load a font shipped with figletkit.

    Args:
        name: Font name without suffix (see bundled_font_names)
        config: Parser settings (defaults if None)

    Returns:
        The bundled Font

    Raises:
        ResourceNotFoundError: If no bundled font has that name
        MalformedHeaderError: If the bundled file is invalid
    """
    config = config or ParserConfig()
    contents = read_bundled_contents(name, config.encoding)
    return build_font(contents, config)


def random_bundled_font(rng: random.Random | None = None) -> Font | None:
    """Pick one of the bundled fonts at random.

    Args:
        rng: Random source (module-level random if None)

    Returns:
        A bundled font, or None if none can be loaded
    """
    fonts = []
    for name in bundled_font_names():
        try:
            fonts.append(load_bundled_font(name))
        except FigletKitError as e:
            logger.warning("Bundled font not loaded", font=name, error=str(e))
    if not fonts:
        return None
    return (rng or random).choice(fonts)
