"""
Thumbnail overlay plugin.

Owns the cue list of the current source, the thumbnail holder element
and the pointer listeners registered on the progress bar. All element
and event handling goes through a RenderSurface supplied by the host, so
the plugin itself never touches a UI toolkit.
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from .downloader import CueFetchError, CueFileDownloader
from .lookup import ImagePreloadCache, ThumbnailLookup, compute_offset
from .models import StyleDescriptor, ThumbnailConfig
from .parser import parse_cues
from .urls import page_base_url, resolve_url

logger = logging.getLogger(__name__)

PLAYER_CLASS = "vjs-vtt-thumbnails"
HOLDER_CLASS = "vjs-vtt-thumbnail-display"

MOUSE_ENTER = "mouseenter"
MOUSE_LEAVE = "mouseleave"
MOUSE_MOVE = "mousemove"


def _format_px(value: float) -> str:
    """Pixel value with at most three decimals and no exponent."""
    value = round(value, 3)
    if value == int(value):
        return str(int(value))
    return str(value)


class HostPlayer:
    """Interface of the media player the plugin is registered on."""

    def ready(self, callback: Callable[[], None]) -> None:
        raise NotImplementedError

    def duration(self) -> float:
        raise NotImplementedError

    def add_class(self, name: str) -> None:
        raise NotImplementedError


class RenderSurface:
    """
    Interface to the progress bar and the thumbnail holder.

    Listeners are registered on the progress bar. Handles returned by
    create_holder are opaque to the plugin.
    """

    def create_holder(self, class_name: str) -> Any:
        raise NotImplementedError

    def remove_holder(self, holder: Any) -> None:
        raise NotImplementedError

    def set_style(self, holder: Any, name: str, value: str) -> None:
        raise NotImplementedError

    def measure_width(self, holder: Any) -> float:
        raise NotImplementedError

    def bar_width(self) -> float:
        raise NotImplementedError

    def pointer_fraction(self, event: Any) -> float:
        raise NotImplementedError

    def add_listener(self, event_name: str, callback: Callable[..., None]) -> None:
        raise NotImplementedError

    def remove_listener(self, event_name: str, callback: Callable[..., None]) -> None:
        raise NotImplementedError

    def hide_mouse_display(self) -> None:
        raise NotImplementedError

    def preload_image(self, url: str) -> Any:
        raise NotImplementedError


class VTTThumbnails:
    """
    Thumbnail preview on a player's progress bar.

    Loads the configured cue source, creates the holder element and shows
    the thumbnail for the time under the pointer while the pointer is over
    the progress bar.
    """

    def __init__(
        self,
        player: HostPlayer,
        surface: RenderSurface,
        config: Optional[ThumbnailConfig] = None,
        fetcher: Optional[Callable[[str], str]] = None,
        cache: Optional[ImagePreloadCache] = None
    ):
        self.player = player
        self.surface = surface
        self.config = config or ThumbnailConfig()
        self.fetcher = fetcher or CueFileDownloader(
            timeout=self.config.timeout, verify_ssl=self.config.verify_ssl
        )
        self.cache = cache if cache is not None else ImagePreloadCache(surface.preload_image)
        self.registered_events: Dict[str, Callable[..., None]] = {}
        self.lookup: Optional[ThumbnailLookup] = None
        self.holder: Any = None
        self.last_style: Optional[StyleDescriptor] = None
        self.last_error: Optional[Exception] = None

    @property
    def is_active(self) -> bool:
        return self.holder is not None

    def attach(self) -> None:
        """Load the configured source and set up the thumbnail holder."""
        self._initialize()

    def set_source(self, src: str) -> None:
        """Switch to another cue source, tearing down the current one first."""
        self._reset()
        self.config = replace(self.config, src=src)
        self._initialize()

    def detach(self) -> None:
        """Remove the holder and every registered listener."""
        self._reset()

    def _reset(self) -> None:
        if self.holder is not None:
            self.surface.remove_holder(self.holder)

        for event_name, callback in self.registered_events.items():
            self.surface.remove_listener(event_name, callback)

        self.registered_events = {}
        self.lookup = None
        self.holder = None
        self.last_style = None

    def _initialize(self) -> None:
        self.last_error = None
        if not self.config.src:
            return

        url = resolve_url(self.config.src, page_base_url(self.config.page_url))

        try:
            content = self.fetcher(url)
        except CueFetchError as e:
            logger.error(f"Thumbnails disabled, cue file unavailable: {str(e)}")
            self.last_error = e
            return

        result = parse_cues(
            content,
            source=self.config.src,
            page_url=self.config.page_url,
            missing_image=self.config.missing_image,
        )
        self.lookup = ThumbnailLookup(result.cues, self.cache)
        logger.info(f"Loaded {len(result)} thumbnail cues from {url[:100]}")

        self._setup_thumbnail_element()

    def _setup_thumbnail_element(self) -> None:
        self.holder = self.surface.create_holder(HOLDER_CLASS)

        if not self.config.show_timestamp:
            self.surface.hide_mouse_display()

        self._register(MOUSE_ENTER, self.on_bar_mouseenter)
        self._register(MOUSE_LEAVE, self.on_bar_mouseleave)

    def _register(self, event_name: str, callback: Callable[..., None]) -> None:
        self.registered_events[event_name] = callback
        self.surface.add_listener(event_name, callback)

    def _unregister(self, event_name: str) -> None:
        callback = self.registered_events.pop(event_name, None)
        if callback is not None:
            self.surface.remove_listener(event_name, callback)

    def on_bar_mouseenter(self, event: Any = None) -> None:
        self._unregister(MOUSE_MOVE)
        self._register(MOUSE_MOVE, self.on_bar_mousemove)
        self.show_thumbnail_holder()

    def on_bar_mouseleave(self, event: Any = None) -> None:
        self._unregister(MOUSE_MOVE)
        self.hide_thumbnail_holder()

    def on_bar_mousemove(self, event: Any) -> None:
        self.update_thumbnail_style(
            self.surface.pointer_fraction(event),
            self.surface.bar_width()
        )

    def show_thumbnail_holder(self) -> None:
        self.surface.set_style(self.holder, "opacity", "1")

    def hide_thumbnail_holder(self) -> None:
        self.surface.set_style(self.holder, "opacity", "0")

    def update_thumbnail_style(self, percent: float, width: float) -> None:
        """
        Show the thumbnail for the pointer position.

        Args:
            percent: Pointer position as a fraction of the progress bar
            width: Progress bar width in pixels
        """
        if self.lookup is None or self.holder is None:
            return

        time = percent * self.player.duration()
        current_style = self.lookup.style_for_time(time)

        if current_style is None:
            self.hide_thumbnail_holder()
            return

        if self.last_style is not current_style:
            self.last_style = current_style
            for name, value in current_style.css().items():
                self.surface.set_style(self.holder, name, value)

        # Full images take their size from the holder once the style is applied
        thumbnail_width = current_style.width_px
        if thumbnail_width is None:
            thumbnail_width = self.surface.measure_width(self.holder)

        offset = compute_offset(percent, width, thumbnail_width)
        self.surface.set_style(self.holder, "transform", f"translateX({_format_px(offset)}px)")


def vtt_thumbnails(
    player: HostPlayer,
    surface: RenderSurface,
    options: Optional[Mapping[str, Any]] = None,
    **kwargs: Any
) -> None:
    """
    Register the thumbnail plugin on a player.

    Setup waits for the player's ready notification; the plugin is then
    available as ``player.vtt_thumbnails``.

    Args:
        player: Host media player
        surface: Rendering surface for the player's progress bar
        options: Plugin options, e.g. {"src": "thumbs.vtt"}
        **kwargs: Passed to VTTThumbnails (fetcher, cache)
    """
    config = ThumbnailConfig.from_options(options)

    def on_player_ready() -> None:
        player.add_class(PLAYER_CLASS)
        plugin = VTTThumbnails(player, surface, config, **kwargs)
        player.vtt_thumbnails = plugin
        plugin.attach()

    player.ready(on_player_ready)
