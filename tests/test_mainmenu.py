import os

os.environ["SDL_VIDEODRIVER"] = "dummy"

import re

import pygame

from hogengine.engine import run
from hogengine.mainmenu import MainMenu


class TitleRecorder(MainMenu):
    def __init__(self, stage_limit):
        super().__init__(stage_limit)
        self.samples = []

    def update(self):
        super().update()
        self.samples.append((self.stage_time, pygame.display.get_caption()[0]))


def test_update_without_elapsed_time_keeps_counting_from_zero():
    menu = MainMenu()
    menu.update()
    assert menu.stage_time == 0.0
    assert menu.stage_limit == 30


def test_run_stops_after_stage_limit():
    menu = MainMenu(stage_limit=0.05)
    run("menu", 320, 240, 1000, 0, menu)
    assert menu.stage_time > menu.stage_limit


def test_title_shows_fps_after_one_second():
    menu = TitleRecorder(stage_limit=1.2)
    run("menu", 320, 240, 100, 0, menu)
    early = [title for elapsed, title in menu.samples if elapsed <= 1.0]
    late = [title for elapsed, title in menu.samples if elapsed > 1.0]
    assert late
    assert all(title == "menu" for title in early)
    assert all(re.fullmatch(r"FPS: \d+", title) for title in late)
    assert menu.stage_time > menu.stage_limit