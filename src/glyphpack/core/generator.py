"""Pack generation orchestration.

This module drives a full generation run: load the catalog once, clear
stale output, render every icon of the requested style (in-process or in
worker processes), and write the manifest in catalog order.

Key components:
- render_icon_task: Top-level picklable function for parallel execution
- PackGenerator: Main orchestrator class
"""

import os
import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

import structlog

from glyphpack.config import GeneratorConfig, GlyphPackSettings, RenderConfig
from glyphpack.core.manifest import (
    ICONS_DIRNAME,
    IMAGE_SUFFIX,
    MANIFEST_FILENAME,
    assemble,
    serialize_manifest,
)
from glyphpack.core.renderer import FontCatalog, GlyphRenderer, decode_codepoint
from glyphpack.core.slug import slugify
from glyphpack.domain import Catalog, IconPackOutput, IconRecord, ManifestEntry
from glyphpack.exceptions import (
    STAGE_PERSIST,
    STAGE_RENDER,
    GlyphRenderError,
    PackWriteError,
)
from glyphpack.io.catalog import CatalogSource, load_catalog
from glyphpack.io.filesystem import (
    remove_tree_best_effort,
    write_bytes_ensuring_parent,
    write_text_ensuring_parent,
)
from glyphpack.utils import PackLogger

ProgressCallback = Callable[[int, int, str, bool], None]

# Built once per worker process by _init_worker
_worker_renderer: GlyphRenderer | None = None


def _init_worker(fonts_dict: dict[str, Any], render_dict: dict[str, Any]) -> None:
    global _worker_renderer
    fonts = FontCatalog.from_dict(fonts_dict)
    _worker_renderer = GlyphRenderer(fonts, RenderConfig(**render_dict))


def _render_and_write(renderer: GlyphRenderer, task: dict[str, Any]) -> dict[str, Any]:
    start_time = time.time()

    try:
        data = renderer.render(
            task["unicode"],
            task["style"],
            task["background_color"],
            task["icon_color"],
        )
    except GlyphRenderError as e:
        return {
            "index": task["index"],
            "stage": STAGE_RENDER,
            "error": str(e),
            "reason": e.reason,
            "traceback": traceback.format_exc(),
            "duration_ms": (time.time() - start_time) * 1000,
        }

    try:
        write_bytes_ensuring_parent(Path(task["path"]), data)
    except PackWriteError as e:
        return {
            "index": task["index"],
            "stage": STAGE_PERSIST,
            "error": str(e),
            "reason": e.reason,
            "path": e.path,
            "traceback": traceback.format_exc(),
            "duration_ms": (time.time() - start_time) * 1000,
        }

    return {
        "index": task["index"],
        "duration_ms": (time.time() - start_time) * 1000,
    }


def render_icon_task(task: dict[str, Any]) -> dict[str, Any]:
    """Render one icon and write its image.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Uses the renderer built by the pool initializer.

    Args:
        task: Serialized task (index, label, slug, unicode, style, colors, path)

    Returns:
        Dictionary containing either:
        - Success: {"index": int, "duration_ms": float}
        - Error: {"index": int, "stage": str, "error": str, "reason": str,
          "traceback": str, "duration_ms": float}
    """
    if _worker_renderer is None:
        raise RuntimeError("Worker not initialized")
    return _render_and_write(_worker_renderer, task)


class PackGenerator:
    """Orchestrates icon pack generation.

    Manages the complete workflow:
    1. Load the catalog (once per generator)
    2. Remove stale images from the output root
    3. Filter icons by style
    4. Render and write each icon, in parallel when configured
    5. Write icons.json in catalog order

    Example:
        generator = PackGenerator(source, fonts)
        output = generator.generate(
            GeneratorConfig(style=IconStyle.SOLID, output_root=Path("pack"))
        )
    """

    def __init__(
        self,
        source: CatalogSource,
        fonts: FontCatalog,
        settings: GlyphPackSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            source: Location of the catalog documents
            fonts: Loaded font catalog
            settings: Application settings (defaults if None)
            logger: Logger to use (module logger if None)
        """
        self.source = source
        self.fonts = fonts
        self.settings = settings or GlyphPackSettings()
        self.logger = logger or structlog.get_logger("glyphpack")
        self.renderer = GlyphRenderer(fonts, self.settings.render, logger=self.logger)
        self._catalog: Catalog | None = None

    @property
    def catalog(self) -> Catalog:
        """The parsed catalog, loaded on first access and reused afterwards.

        Raises:
            CatalogParseError: If the catalog documents are malformed
        """
        if self._catalog is None:
            self._catalog = load_catalog(self.source)
            self.logger.info(
                "Catalog loaded",
                icons=len(self._catalog.icons),
                categories=len(self._catalog.categories),
            )
        return self._catalog

    def generate(
        self,
        config: GeneratorConfig,
        progress_callback: ProgressCallback | None = None,
    ) -> IconPackOutput:
        """Generate an icon pack.

        Args:
            config: Style, colors and output root for this run
            progress_callback: Optional callback(completed, total, label, success)
                for progress updates

        Returns:
            IconPackOutput describing the written pack

        Raises:
            CatalogParseError: If the catalog cannot be loaded (nothing written)
            GlyphRenderError: If an icon fails to render and skipping is off
            PackWriteError: If an image or the manifest cannot be written
        """
        pack_logger = PackLogger(self.logger)
        stats = pack_logger.stats
        stats.start_time = time.time()

        catalog = self.catalog

        output_root = config.output_root.expanduser().resolve()
        icons_dir = output_root / ICONS_DIRNAME
        manifest_path = output_root / MANIFEST_FILENAME

        self.logger.info(
            "Starting pack generation",
            style=config.style.value,
            family=self.fonts.family_for(config.style),
            output=str(output_root),
        )

        remove_tree_best_effort(icons_dir)

        records = catalog.filter_by_style(config.style.value)
        tasks = self._plan_tasks(records, icons_dir, config, pack_logger)

        self.logger.info(
            "Filtered icons",
            total=len(catalog.icons),
            matching=len(records),
            to_render=len(tasks),
        )

        rendered = self._render_icons(tasks, pack_logger, progress_callback)

        entries: list[ManifestEntry] = [
            assemble(records[task["index"]], task["slug"], catalog.categories)
            for task in tasks
            if task["index"] in rendered
        ]

        write_text_ensuring_parent(manifest_path, serialize_manifest(entries))

        stats.end_time = time.time()

        self.logger.info(
            "Pack generation complete",
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            manifest=str(manifest_path),
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return IconPackOutput(
            root=output_root,
            icons_dir=icons_dir,
            manifest_path=manifest_path,
            entries=entries,
            stats=stats,
        )

    def _plan_tasks(
        self,
        records: list[IconRecord],
        icons_dir: Path,
        config: GeneratorConfig,
        pack_logger: PackLogger,
    ) -> list[dict[str, Any]]:
        """Build one task per record, keeping only the last record per slug.

        When invalid glyphs are skipped, records whose code point cannot be
        decoded are dropped first, so an earlier valid record keeps a slug
        that a later broken one would otherwise take.

        Args:
            records: Style-filtered records in catalog order
            icons_dir: Directory images are written to
            config: Run configuration
            pack_logger: Logger collecting skip and error statistics

        Returns:
            Serialized tasks in catalog order
        """
        slugs = [slugify(record.label) for record in records]
        candidates = [
            index
            for index, record in enumerate(records)
            if self._accepts_codepoint(record, slugs[index], pack_logger)
        ]

        last_index: dict[str, int] = {}
        for index in candidates:
            last_index[slugs[index]] = index

        tasks: list[dict[str, Any]] = []
        for index in candidates:
            record, slug = records[index], slugs[index]
            winner = last_index[slug]
            if winner != index:
                pack_logger.log_icon_skipped(
                    record.label,
                    f"slug '{slug}' overwritten by '{records[winner].label}'",
                )
                continue

            tasks.append(
                {
                    "index": index,
                    "label": record.label,
                    "slug": slug,
                    "unicode": record.unicode,
                    "style": config.style.value,
                    "background_color": config.background_color,
                    "icon_color": config.icon_color,
                    "path": str(icons_dir / f"{slug}{IMAGE_SUFFIX}"),
                }
            )
        return tasks

    def _accepts_codepoint(
        self,
        record: IconRecord,
        slug: str,
        pack_logger: PackLogger,
    ) -> bool:
        """Check a record's code point up front when invalid glyphs are skipped."""
        if not self.settings.processing.skip_invalid_glyphs:
            return True

        try:
            decode_codepoint(record.unicode)
        except GlyphRenderError as e:
            pack_logger.log_icon_error(
                record.label, GlyphRenderError(e.reason, label=record.label, slug=slug)
            )
            return False
        return True

    def _render_icons(
        self,
        tasks: list[dict[str, Any]],
        pack_logger: PackLogger,
        progress_callback: ProgressCallback | None,
    ) -> set[int]:
        """Render all tasks, returning the indexes that were written."""
        max_workers = self.settings.processing.max_workers
        if max_workers is None:
            max_workers = os.cpu_count() or 1

        if max_workers == 1 or len(tasks) <= 1:
            return self._render_sequential(tasks, pack_logger, progress_callback)
        return self._render_parallel(tasks, max_workers, pack_logger, progress_callback)

    def _render_sequential(
        self,
        tasks: list[dict[str, Any]],
        pack_logger: PackLogger,
        progress_callback: ProgressCallback | None,
    ) -> set[int]:
        rendered: set[int] = set()
        total = len(tasks)

        for completed, task in enumerate(tasks, start=1):
            pack_logger.log_icon_start(task["label"], task["slug"])
            result = _render_and_write(self.renderer, task)
            success = self._handle_result(task, result, pack_logger)
            if success:
                rendered.add(task["index"])
            if progress_callback is not None:
                progress_callback(completed, total, task["label"], success)

        return rendered

    def _render_parallel(
        self,
        tasks: list[dict[str, Any]],
        max_workers: int,
        pack_logger: PackLogger,
        progress_callback: ProgressCallback | None,
    ) -> set[int]:
        """Render tasks in worker processes.

        Results arrive in completion order; callers rebuild catalog order from
        the returned indexes.
        """
        rendered: set[int] = set()
        total = len(tasks)
        completed = 0

        self.logger.info(
            "Starting parallel rendering",
            icon_count=total,
            max_workers=max_workers,
        )

        with ProcessPoolExecutor(
            max_workers=max_workers,
            initializer=_init_worker,
            initargs=(self.fonts.to_dict(), self.settings.render.model_dump()),
        ) as executor:
            pending_futures = {
                executor.submit(render_icon_task, task): task for task in tasks
            }

            try:
                for future in as_completed(list(pending_futures)):
                    task = pending_futures.pop(future)
                    success = self._handle_result(task, future.result(), pack_logger)
                    if success:
                        rendered.add(task["index"])

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, task["label"], success)

            except BaseException:
                self.logger.info(
                    "Cancelling pending icons",
                    pending=len(pending_futures),
                )
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return rendered

    def _handle_result(
        self,
        task: dict[str, Any],
        result: dict[str, Any],
        pack_logger: PackLogger,
    ) -> bool:
        """Record a task result.

        Returns:
            True if the image was written, False if the icon was skipped

        Raises:
            GlyphRenderError: On a render failure when skipping is off
            PackWriteError: On any write failure
        """
        if "error" not in result:
            pack_logger.log_icon_complete(
                task["label"], task["slug"], result.get("duration_ms", 0.0)
            )
            return True

        if result["stage"] == STAGE_PERSIST:
            pack_logger.log_icon_error(
                task["label"], Exception(result["error"]), result.get("traceback")
            )
            raise PackWriteError(result["path"], result["reason"])

        error = GlyphRenderError(result["reason"], label=task["label"], slug=task["slug"])
        pack_logger.log_icon_error(task["label"], error, result.get("traceback"))
        if self.settings.processing.skip_invalid_glyphs:
            return False
        raise error
