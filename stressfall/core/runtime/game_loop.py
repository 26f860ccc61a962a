"""
game_loop.py
------------
Defines the GameLoop class that hosts the simulation in a pygame window.

Responsibilities
----------------
- Initialize pygame, the window and the frame clock.
- Build the scheduler, event bus, audio, renderer, input and simulation.
- Each frame: route events, pump the scheduler, advance audio fades, draw.
"""

import random

import pygame

from stressfall.audio.sound_manager import SoundManager
from stressfall.core.debug.debug_logger import DebugLogger
from stressfall.core.runtime.game_settings import Display
from stressfall.core.runtime.simulation_loop import SimulationLoop
from stressfall.core.services.event_manager import EventManager
from stressfall.core.services.input_manager import InputManager
from stressfall.core.services.scheduler import FrameScheduler
from stressfall.graphics.draw_manager import DrawManager


class GameLoop:
    """Owns the pygame window and drives the simulation once per frame."""

    def __init__(self, config, fps=Display.FPS, audio=True, seed=None):
        """
        Args:
            config: Validated GameConfig
            fps: Target frame rate (spawn cadence and fall speed follow it)
            audio: False runs without initializing the mixer
            seed: Optional RNG seed for reproducible spawns
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)

        self.config = config
        self.fps = fps
        self.screen = pygame.display.set_mode(
            (int(config.board_width), int(config.board_height) + Display.HUD_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        DebugLogger.init_entry("Pygame")

        self.scheduler = FrameScheduler()
        self.events = EventManager()

        self.sound = SoundManager(enabled=audio)
        self.sound.bind(self.events)

        self.draw_manager = DrawManager(config.board_width, config.board_height)
        self.simulation = SimulationLoop(
            config, self.scheduler, self.events,
            render=self.draw_manager,
            rng=random.Random(seed),
        )
        self.input_manager = InputManager(self.simulation, self.scheduler, config.board_width)

        self.running = True

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")
        self.simulation.boot()

        while self.running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if self.input_manager.handle_event(event) == "quit":
                    self.running = False
                    DebugLogger.action("Quit signal received")
                    break

            self.scheduler.pump(pygame.time.get_ticks())
            self.sound.update()

            self.draw_manager.draw(self.screen)
            pygame.display.flip()

        self.shutdown()

    def shutdown(self):
        self.simulation.stop()
        self.scheduler.clear()
        self.sound.reset()
        self.events.clear_all()
        pygame.quit()
        DebugLogger.system("Pygame terminated")
