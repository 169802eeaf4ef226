"""
Zurts Arena - Pygame front end for the zurts game

The same Game used by the terminal driver, drawn as tiles. The advisor's
suggestion is outlined in green on the player's turn.

Controls:
  Arrows      Move the player (player turn) / throw direction (zurt turn)
  Space       Stand
  Enter       Follow the advisor
  R / Y / B   Pick the color to throw (zurt turn)
  N           New game
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys
from collections import deque

import pygame

from zurts import (
    CellStatus,
    Direction,
    FollowAdvice,
    Game,
    GameConfig,
    MovePlayer,
    SignalBus,
    StandPlayer,
    ThrowColor,
    ZurtsError,
    recommend_move,
)

TITLE = "Zurts Arena"
TILE = 36
SIDEBAR_W = 300
FPS = 30
BG_COLOR = (18, 22, 30)
EMPTY_COLOR = (40, 44, 56)
WALL_COLOR = (110, 110, 120)
PLAYER_COLOR = (240, 240, 240)
DEAD_COLOR = (200, 40, 40)
HINT_COLOR = (60, 220, 90)
TEXT_COLOR = (200, 200, 220)
ZURT_COLORS = {"R": (220, 60, 60), "Y": (230, 210, 60), "B": (70, 120, 230)}

KEY_DIRS = {
    pygame.K_UP: Direction.NORTH,
    pygame.K_RIGHT: Direction.EAST,
    pygame.K_DOWN: Direction.SOUTH,
    pygame.K_LEFT: Direction.WEST,
}
KEY_COLORS = {pygame.K_r: "R", pygame.K_y: "Y", pygame.K_b: "B"}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Zurts Arena - pygame demo")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--rows", type=int, default=10, help="Arena rows (default: 10)")
    p.add_argument("--cols", type=int, default=12, help="Arena columns (default: 12)")
    p.add_argument("--zurts", type=int, default=50, help="Starting zurts (default: 50)")
    return p.parse_args()


def build_game(args: argparse.Namespace, log: deque[str]) -> Game:
    bus = SignalBus()

    def _on_destroyed(signal: str, data: dict) -> None:
        log.append(f"{data['color']} zurt destroyed at ({data['row']},{data['col']})")

    def _on_died(signal: str, data: dict) -> None:
        log.append(f"Player died at ({data['row']},{data['col']})")

    def _on_turn(signal: str, data: dict) -> None:
        follow = "followed" if data["followed"] else "ignored"
        log.append(f"{data['color']} {data['direction'].lower()} {follow}")

    bus.subscribe("zurt_destroyed", _on_destroyed)
    bus.subscribe("player_died", _on_died)
    bus.subscribe("zurts_turn", _on_turn)
    config = GameConfig(rows=args.rows, cols=args.cols, zurts=args.zurts, seed=args.seed)
    return Game(config, bus=bus)


def _draw_arena(screen: pygame.Surface, game: Game, player_turn: bool) -> None:
    arena = game.arena
    for r in range(1, arena.rows + 1):
        for c in range(1, arena.cols + 1):
            rect = pygame.Rect((c - 1) * TILE, (r - 1) * TILE, TILE - 1, TILE - 1)
            wall = arena.get_cell_status(r, c) == CellStatus.WALL
            pygame.draw.rect(screen, WALL_COLOR if wall else EMPTY_COLOR, rect)

    for zurt in arena.zurts:
        cx = (zurt.col - 1) * TILE + TILE // 2
        cy = (zurt.row - 1) * TILE + TILE // 2
        pygame.draw.circle(screen, ZURT_COLORS[zurt.color], (cx, cy), TILE // 3)
        stacked = arena.number_of_zurts_at(zurt.row, zurt.col)
        if stacked > 1:
            pygame.draw.circle(screen, TEXT_COLOR, (cx, cy), TILE // 3, 2)

    player = arena.player
    if player is None:
        return
    rect = pygame.Rect((player.col - 1) * TILE + 6, (player.row - 1) * TILE + 6,
                       TILE - 13, TILE - 13)
    pygame.draw.rect(screen, DEAD_COLOR if player.is_dead() else PLAYER_COLOR, rect)

    if player_turn and not game.is_over():
        hint = recommend_move(arena, player.row, player.col)
        if hint is not None:
            dr, dc = hint.delta
            hr, hc = player.row + dr, player.col + dc
            hint_rect = pygame.Rect((hc - 1) * TILE, (hr - 1) * TILE, TILE - 1, TILE - 1)
            pygame.draw.rect(screen, HINT_COLOR, hint_rect, 2)


def _draw_sidebar(
    screen: pygame.Surface,
    font: pygame.font.Font,
    game: Game,
    player_turn: bool,
    color: str,
    log: deque[str],
) -> None:
    x = game.arena.cols * TILE + 10
    if game.is_over():
        phase = "You win!" if game.player_won() else "You lose."
    elif player_turn:
        phase = "Your move"
    else:
        phase = f"Throw: {color} + arrow"
    lines = [
        phase,
        f"Zurts: {game.arena.zurt_count()}   Turn: {game.turn}",
        f"Seed: {game.seed}",
        "",
        *log,
    ]
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT_COLOR)
        screen.blit(surf, (x, 8 + i * 18))


def main() -> None:
    args = parse_args()
    log: deque[str] = deque(maxlen=20)
    try:
        game = build_game(args, log)
    except ZurtsError as exc:
        print(f"***** {exc}", file=sys.stderr)
        sys.exit(1)

    pygame.init()
    width = game.arena.cols * TILE + SIDEBAR_W
    height = max(game.arena.rows * TILE, 420)
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    player_turn = True
    color = "R"
    running = True

    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type != pygame.KEYDOWN:
                continue
            elif event.key == pygame.K_ESCAPE:
                running = False
            elif event.key == pygame.K_n:
                log.clear()
                game = build_game(args, log)
                player_turn = True
            elif game.is_over():
                continue
            elif player_turn:
                cmd = None
                if event.key in KEY_DIRS:
                    cmd = MovePlayer(KEY_DIRS[event.key])
                elif event.key == pygame.K_SPACE:
                    cmd = StandPlayer()
                elif event.key == pygame.K_RETURN:
                    cmd = FollowAdvice()
                if cmd is not None:
                    log.append(game.apply(cmd))
                    player_turn = False
            elif event.key in KEY_COLORS:
                color = KEY_COLORS[event.key]
            elif event.key in KEY_DIRS:
                log.append(game.apply(ThrowColor(color, KEY_DIRS[event.key])))
                player_turn = True

        # --- Draw ---
        screen.fill(BG_COLOR)
        _draw_arena(screen, game, player_turn)
        _draw_sidebar(screen, font, game, player_turn, color, log)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
