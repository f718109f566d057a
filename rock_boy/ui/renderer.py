"""
Renderer - Reads gameplay state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
import math

import pygame

from gameplay.game import Game, GameMode
from gameplay.hazards import SpikeOrientation
from gameplay.particles import Particle, ParticlePool


# Colors
COLOR_SKY = (25, 28, 40)
COLOR_GROUND = (85, 51, 17)
COLOR_PLATFORM = (101, 67, 33)
COLOR_SPIKE = (255, 0, 0)
COLOR_MINER = (255, 215, 0)
COLOR_MINER_ATTACK = (255, 120, 60)
COLOR_STAR = (255, 215, 0)
COLOR_STAR_EDGE = (255, 255, 255)
COLOR_DAMAGE = (255, 64, 64)
COLOR_CRACK = (40, 40, 40)
COLOR_HUD = (255, 255, 255)
COLOR_BAR_BG = (51, 51, 51)
COLOR_HP = (0, 255, 0)
COLOR_XP = (255, 215, 0)
COLOR_OVERLAY = (0, 0, 0, 180)


class PygameRenderer:
    """
    Draws the game to a pygame surface.

    This class reads from Game but never modifies it.
    """

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font = pygame.font.SysFont("arial", 16)
        self.big_font = pygame.font.SysFont("arial", 48)
        self.mono = pygame.font.SysFont("monospace", 12)

    def render_frame(self, game: Game) -> None:
        self.screen.fill(COLOR_SKY)
        cam = game.camera

        ground_top = game.params.ground_y - cam.y
        width, height = self.screen.get_size()
        pygame.draw.rect(self.screen, COLOR_GROUND, (0, ground_top, width, height - ground_top))

        for platform in game.platforms:
            sx, sy = cam.to_screen(platform.x, platform.y)
            pygame.draw.rect(self.screen, COLOR_PLATFORM, (sx, sy, platform.width, platform.height))

        for spike in game.spikes:
            self._draw_spike(game, spike)

        for miner in game.miners:
            self._draw_miner(game, miner)

        self._draw_pool(game, game.effects.star_trail)
        if not game.star.collected:
            self._draw_star(game)

        if game.mode != GameMode.GAME_OVER:
            self._draw_rock(game)

        for pool in (game.effects.evolution, game.effects.collect, game.effects.sparks):
            self._draw_pool(game, pool)

        self._draw_hud(game)

        if game.mode == GameMode.INTERSTITIAL:
            self._draw_interstitial(game)
        elif game.mode == GameMode.GAME_OVER:
            self._draw_game_over(game)
        elif game.show_debug_panel:
            self._draw_debug(game)

        pygame.display.flip()

    # =========================================================================
    # WORLD
    # =========================================================================

    def _draw_spike(self, game: Game, spike) -> None:
        sx, sy = game.camera.to_screen(spike.x, spike.y)
        w, h = spike.width, spike.height
        if spike.orientation == SpikeOrientation.UP:
            points = [(sx, sy + h), (sx + w / 2, sy), (sx + w, sy + h)]
        else:
            points = [(sx, sy), (sx + w / 2, sy + h), (sx + w, sy)]
        pygame.draw.polygon(self.screen, COLOR_SPIKE, points)

    def _draw_miner(self, game: Game, miner) -> None:
        sx, feet = game.camera.to_screen(miner.x, miner.y)
        color = COLOR_MINER_ATTACK if miner.is_attacking else COLOR_MINER
        head_y = feet - miner.height + 8
        pygame.draw.circle(self.screen, color, (int(sx), int(head_y)), 8, 2)
        pygame.draw.line(self.screen, color, (sx - 10, head_y - 5), (sx + 10, head_y - 5), 2)
        hip_y = feet - 18
        pygame.draw.line(self.screen, color, (sx, head_y + 8), (sx, hip_y), 2)

        stride = math.sin(miner.walk_phase) * 6
        pygame.draw.line(self.screen, color, (sx, hip_y), (sx - stride, feet), 2)
        pygame.draw.line(self.screen, color, (sx, hip_y), (sx + stride, feet), 2)

        # Pickaxe swings through a half circle while attacking
        angle = -math.pi / 2 + miner.attack_progress * math.pi
        reach = 22
        hand = (sx, head_y + 14)
        tip = (sx + miner.facing * math.cos(angle) * reach, head_y + 14 + math.sin(angle) * reach)
        pygame.draw.line(self.screen, color, hand, tip, 2)

    def _draw_star(self, game: Game) -> None:
        star = game.star
        sx, sy = game.camera.to_screen(star.x, star.y)
        points = []
        for i in range(5):
            angle = star.rotation + (i * 4 * math.pi) / 5
            points.append((sx + math.cos(angle) * star.size, sy + math.sin(angle) * star.size))
        pygame.draw.polygon(self.screen, COLOR_STAR, points)
        pygame.draw.polygon(self.screen, COLOR_STAR_EDGE, points, 2)

    def _draw_rock(self, game: Game) -> None:
        body = game.body
        sx, sy = game.camera.to_screen(body.x, body.y)
        cos_r, sin_r = math.cos(body.rotation), math.sin(body.rotation)

        def rotate(px, py):
            return (sx + px * cos_r - py * sin_r, sy + px * sin_r + py * cos_r)

        color = COLOR_DAMAGE if game.health.damage_flash_time > 0 else game.progression.stage.color
        outline = [rotate(px, py) for px, py in body.points]
        if len(outline) >= 3:
            pygame.draw.polygon(self.screen, color, outline)

        for detail in body.details:
            start = (math.cos(detail.start_angle) * body.radius * 0.5,
                     math.sin(detail.start_angle) * body.radius * 0.5)
            end = (start[0] + math.cos(detail.start_angle) * detail.length,
                   start[1] + math.sin(detail.start_angle) * detail.length)
            pygame.draw.line(self.screen, COLOR_CRACK, rotate(*start), rotate(*end), 1)

    def _draw_pool(self, game: Game, pool: ParticlePool) -> None:
        for p in pool.alive():
            sx, sy = game.camera.to_screen(p.x, p.y)
            shade = tuple(int(c * p.alpha) for c in p.color)
            pygame.draw.circle(self.screen, shade, (int(sx), int(sy)), max(1, int(p.size)))

    def _draw_piece(self, game: Game, p: Particle) -> None:
        """A rotated square shard of the broken rock."""
        sx, sy = game.camera.to_screen(p.x, p.y)
        half = p.size / 2
        cos_r, sin_r = math.cos(p.rotation), math.sin(p.rotation)
        corners = [(-half, -half), (half, -half), (half, half), (-half, half)]
        points = [(sx + cx * cos_r - cy * sin_r, sy + cx * sin_r + cy * cos_r) for cx, cy in corners]
        shade = tuple(int(c * p.alpha) for c in p.color)
        pygame.draw.polygon(self.screen, shade, points)
        pygame.draw.polygon(self.screen, COLOR_CRACK, points, 1)

    # =========================================================================
    # OVERLAYS
    # =========================================================================

    def _draw_hud(self, game: Game) -> None:
        hud = game.get_hud_state()
        width = self.screen.get_width()

        bar_w, bar_h, pad = 150, 15, 10
        pygame.draw.rect(self.screen, COLOR_BAR_BG, (width - bar_w - pad, pad, bar_w, bar_h))
        pygame.draw.rect(
            self.screen, COLOR_HP,
            (width - bar_w - pad, pad, int(bar_w * game.health.ratio), bar_h)
        )

        text = self.font.render(
            f"Level {hud['level']} {hud['evolution']}  World {hud['world_level']}", True, COLOR_HUD
        )
        self.screen.blit(text, (10, 10))
        pygame.draw.rect(self.screen, COLOR_BAR_BG, (10, 32, 150, 5))
        pygame.draw.rect(self.screen, COLOR_XP, (10, 32, int(150 * game.progression.xp_ratio), 5))

    def _draw_overlay(self) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

    def _draw_centered(self, font, text: str, y: int) -> None:
        surface = font.render(text, True, COLOR_HUD)
        x = (self.screen.get_width() - surface.get_width()) // 2
        self.screen.blit(surface, (x, y))

    def _draw_interstitial(self, game: Game) -> None:
        self._draw_overlay()
        self._draw_pool(game, game.effects.celebration)
        mid = self.screen.get_height() // 2
        self._draw_centered(self.big_font, "You Win!", mid - 80)
        self._draw_centered(self.font, game.interstitial.message, mid)

    def _draw_game_over(self, game: Game) -> None:
        for piece in game.effects.rock_break.alive():
            self._draw_piece(game, piece)
        self._draw_overlay()
        mid = self.screen.get_height() // 2
        self._draw_centered(self.big_font, "Game Over", mid - 80)
        self._draw_centered(self.font, "Press Space to Try Again", mid)

    def _draw_debug(self, game: Game) -> None:
        hud = game.get_hud_state()
        lines = [
            f"Level: {hud['level']}",
            f"Evolution: {hud['evolution']}",
            f"XP: {int(hud['xp'])}/{hud['xp_to_next']}",
            f"Health: {int(hud['health'])}/{int(hud['max_health'])}",
            f"Entities: {len(game.content)}",
            "",
            "[: Level Down",
            "]: Level Up",
            "\\: Hide Panel",
        ]
        x = self.screen.get_width() - 200
        panel = pygame.Surface((190, 15 + 13 * len(lines)), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 180))
        self.screen.blit(panel, (x, 40))
        for i, line in enumerate(lines):
            self.screen.blit(self.mono.render(line, True, COLOR_HUD), (x + 5, 45 + i * 13))
