# ripple/core/application.py
import logging
from typing import List

import moderngl
import numpy as np
import pygame

from ripple.assets import AssetLoader, generate_distortion_mask
from ripple.core.settings import AppSettings
from ripple.core.timing import FixedStep
from ripple.graphics.renderer import SceneTextures, WaterRenderer
from ripple.input.pointer import PointerTracker
from ripple.text.metrics import round_half_up
from ripple.waves.scheduler import WaveInstance, WaveScheduler

logger = logging.getLogger(__name__)


def canvas_size(width: int, height: int, pixel_ratio: float) -> tuple[int, int]:
    """Device pixel size of the canvas, rounded to even numbers."""
    return (
        round_half_up(width * pixel_ratio * 0.5) * 2,
        round_half_up(height * pixel_ratio * 0.5) * 2,
    )


def format_gl_version(version_code: int) -> str:
    """moderngl reports 3.3 as 330."""
    major, minor = divmod(version_code, 100)
    return f"{major}.{minor // 10}"


class Application:
    def __init__(self, settings: AppSettings):
        self.settings = settings
        display = settings.display

        self.window: pygame.Surface | None = None
        self.ctx: moderngl.Context | None = None
        self.renderer: WaterRenderer | None = None

        self.clock: pygame.time.Clock | None = None
        self._pygame_initialized = False

        self.timer = FixedStep(target_fps=display.fps)
        self.pointer = PointerTracker(debounce=1.0 / display.fps)
        self.scheduler = WaveScheduler(
            capacity=settings.waves.capacity,
            rng=np.random.default_rng(settings.waves.seed),
        )

        self.running = False
        self._instances: List[WaveInstance] = []

    def _ensure_window(self) -> None:
        if self.window is not None:
            return

        display = self.settings.display

        pygame.init()
        self._pygame_initialized = True

        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )

        self.window = pygame.display.set_mode(
            (display.width, display.height),
            pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE,
        )
        pygame.display.set_caption(display.title)

        self.ctx = moderngl.create_context()
        logger.info("OpenGL version %s", format_gl_version(self.ctx.version_code))

        self.clock = pygame.time.Clock()

    def _load_scene(self) -> None:
        assert self.ctx is not None
        assets = self.settings.assets
        loader = AssetLoader(assets.root)

        if assets.distortion:
            distortion = loader.texture(assets.distortion)
        else:
            logger.info("No distortion mask given, generating one")
            distortion = generate_distortion_mask()

        textures = SceneTextures(
            background=loader.texture(assets.background),
            distortion=distortion,
            font=loader.font_texture(assets.font_texture),
        )
        font = loader.font(assets.font_atlas)

        self.renderer = WaterRenderer(
            self.ctx,
            textures,
            font,
            self.settings.text,
            self.settings.waves,
        )

    def resize(self, width: int, height: int) -> None:
        pixel_ratio = self.settings.display.pixel_ratio
        canvas_w, canvas_h = canvas_size(width, height, pixel_ratio)

        self.pointer.resize(width, height, pixel_ratio)
        if self.renderer is not None:
            self.renderer.resize(canvas_w, canvas_h, screen_size=(width, height))

    def run(self) -> None:
        self._ensure_window()
        try:
            self._load_scene()

            display = self.settings.display
            self.resize(display.width, display.height)

            self.running = True
            self.timer.start()

            while self.running:
                self.frame()
        finally:
            self.stop()
            self._shutdown()

    def frame(self) -> None:
        """One frame: pump input, advance the waves, draw."""
        for event in pygame.event.get():
            self._handle_event(event)

        if not self.running:
            return

        steps = self.timer.advance()
        now = self.timer.now
        for _ in range(steps):
            state = self.pointer.sample(now)
            self._instances = self.scheduler.tick(state.cursor, state.activating)

        if self.renderer is not None:
            self.renderer.render(self._instances)

        pygame.display.flip()

        if self.clock is not None:
            self.clock.tick(self.settings.display.fps)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.stop()
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        else:
            self.pointer.process_event(event, self.timer.clock())

    def stop(self) -> None:
        """Stop scheduling frames. Safe to call more than once."""
        if self.running:
            logger.info("Stopping")
        self.running = False
        self.pointer.reset()
        self._instances = []

    def _shutdown(self) -> None:
        if self.renderer is not None:
            self.renderer.release()
            self.renderer = None

        self.scheduler.reset()

        if self.ctx is not None:
            self.ctx.release()
            self.ctx = None

        if self._pygame_initialized:
            pygame.quit()
            self._pygame_initialized = False
        self.window = None
