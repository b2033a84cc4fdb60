import argparse
import logging
import math

import pygame

from importlib.metadata import version, PackageNotFoundError

from . import constants as C

try:
    __version__ = version("tribody")
except PackageNotFoundError:
    __version__ = "0.0.0"
from .analysis import EnergyMonitor
from .engine import Engine
from .presets import PRESETS
from .rendering import draw_bodies, styles_from_preset

logger = logging.getLogger(__name__)


class Simulation:
    """Interactive driver that feeds wall-clock time to the engine.

    Elapsed time is scaled by ``speed_factor`` and collected in
    :attr:`accumulator`; whole multiples of the engine's ``dt`` are consumed
    as physics steps and the remainder carries over to the next frame.
    """

    def __init__(
        self,
        engine: Engine = None,
        styles=None,
        preset: str = C.DEFAULT_PRESET,
        speed_factor: float = C.SPEED_FACTOR,
        trail_length=C.DEFAULT_TRAIL_LENGTH,
        energy_csv=None,
        init_pygame: bool = True,
    ):
        self.speed_factor = float(speed_factor)
        # 0 or None keeps every trail point
        self.trail_length = trail_length or None
        self.energy_csv = energy_csv
        self.energy_monitor = EnergyMonitor()
        self.accumulator = 0.0
        self.paused = False
        self.running = False
        self.current_preset = preset

        if engine is None:
            self.load_preset(preset)
        else:
            self.engine = engine
            self.styles = list(styles) if styles is not None else styles_from_preset(
                [{} for _ in engine.bodies]
            )
            self._reset_energy_monitor()

        if init_pygame:
            pygame.init()
            self.screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
            pygame.display.set_caption(f"{C.WINDOW_TITLE} v{__version__}")
            self.clock = pygame.time.Clock()
        else:
            self.screen = None
            self.clock = None

    # ------------------------------------------------------------------
    def load_preset(self, preset_name: str) -> None:
        """Replace the engine with a fresh one built from a named preset."""
        if preset_name not in PRESETS:
            raise KeyError(f"Preset '{preset_name}' not found")
        self.engine = Engine.from_preset(preset_name, max_trail_length=self.trail_length)
        self.styles = styles_from_preset(PRESETS[preset_name])
        self.accumulator = 0.0
        self.current_preset = preset_name
        self._reset_energy_monitor()
        logger.info("Loaded preset '%s' (%d bodies)", preset_name, len(self.styles))

    def _reset_energy_monitor(self):
        self.energy_monitor.g_constant = self.engine.g_constant
        self.energy_monitor.softening = self.engine.softening
        self.energy_monitor.set_initial_energy(self.engine.bodies)

    # ------------------------------------------------------------------
    def advance(self, elapsed: float) -> int:
        """Consume ``elapsed`` wall-clock seconds and return the steps taken."""
        if not math.isfinite(elapsed) or elapsed < 0:
            raise ValueError(f"Elapsed time must be finite and non-negative, got {elapsed!r}")
        if self.paused:
            return 0
        self.accumulator += elapsed * self.speed_factor
        dt = self.engine.dt
        steps = 0
        while self.accumulator >= dt:
            self.engine.step()
            self.accumulator -= dt
            steps += 1
        if steps:
            self.energy_monitor.update(self.engine.bodies)
        logger.debug("Advanced %d steps, %.6f left in accumulator", steps, self.accumulator)
        return steps

    # ------------------------------------------------------------------
    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                    logger.info("Simulation %s", "paused" if self.paused else "resumed")
                elif event.key == pygame.K_r:
                    self.load_preset(self.current_preset)

    # ------------------------------------------------------------------
    def draw(self) -> None:
        """Render the current frame."""
        if self.screen is None:
            return
        draw_bodies(self.screen, self.engine.bodies, self.styles)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main application loop."""
        if self.screen is None or self.clock is None:
            raise RuntimeError("Simulation cannot run without pygame initialized")
        self.running = True
        try:
            while self.running:
                time_delta = self.clock.tick(C.FPS) / 1000.0
                self.handle_events()
                self.advance(time_delta)
                self.draw()
        finally:
            logger.info(
                "Stopped after %d steps (t=%g), max energy drift %.3e%%",
                self.engine.steps, self.engine.time, self.energy_monitor.max_drift(),
            )
            if self.energy_csv:
                self.energy_monitor.export_csv(self.energy_csv)
                logger.info("Energy drift history written to %s", self.energy_csv)
            pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Three Body Simulation")
    parser.add_argument("--preset", default=C.DEFAULT_PRESET, choices=sorted(PRESETS), help="Initial configuration")
    parser.add_argument("--speed", type=float, default=C.SPEED_FACTOR, help="Simulation time per wall-clock second")
    parser.add_argument(
        "--trail-length",
        type=int,
        default=C.DEFAULT_TRAIL_LENGTH,
        help="Trail points kept per body (0 keeps every point)",
    )
    parser.add_argument("--energy-csv", help="Write the energy drift history to this CSV file on exit")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sim = Simulation(
        preset=args.preset,
        speed_factor=args.speed,
        trail_length=args.trail_length,
        energy_csv=args.energy_csv,
    )
    sim.run()


if __name__ == "__main__":
    main()
