# renderer.py
import pygame

from foodchain.agent_base import Food
from foodchain.config import CELL_SIZE, MARGIN, INFO_HEIGHT, SIDE_PANEL_WIDTH
from foodchain.roles import Role

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BOARD_COLOR = (240, 240, 230)
FOOD_COLOR = (255, 223, 0)
PREY_COLOR = (100, 200, 255)
PREDATOR_COLOR = (255, 80, 80)
APEX_COLOR = (150, 60, 200)
WALK_HIGHLIGHT = (170, 230, 170)
ABILITY_HIGHLIGHT = (255, 190, 120)
TEXT_COLOR = (0, 0, 0)
SIDE_PANEL_TEXT_COLOR = (255, 255, 255)

ROLE_COLORS = {
    Role.APEX: APEX_COLOR,
    Role.PREDATOR: PREDATOR_COLOR,
    Role.PREY: PREY_COLOR,
}

screen = None
font = None
small_font = None


def init(grid_size, caption="Food Chain"):
    """Open the window sized for the board. Must run before draw()."""
    global screen, font, small_font
    pygame.init()
    font = pygame.font.SysFont("Arial", 20)
    small_font = pygame.font.SysFont("Arial", 14)
    board = board_width(grid_size)
    screen = pygame.display.set_mode((board + SIDE_PANEL_WIDTH, board + INFO_HEIGHT))
    pygame.display.set_caption(caption)
    return screen


def board_width(grid_size):
    return grid_size * (CELL_SIZE + MARGIN) + MARGIN


def cell_at_pixel(px, py, grid_size):
    """Board cell under a mouse position, or None outside the board."""
    x = (px - MARGIN) // (CELL_SIZE + MARGIN)
    y = (py - MARGIN) // (CELL_SIZE + MARGIN)
    if 0 <= x < grid_size and 0 <= y < grid_size:
        return int(x), int(y)
    return None


def ActionDraw(action_log_str):
    """Draws the last action log in the side panel."""
    grid_w = screen.get_width() - SIDE_PANEL_WIDTH
    panel_rect = pygame.Rect(grid_w, 0, SIDE_PANEL_WIDTH, screen.get_height())
    pygame.draw.rect(screen, BLACK, panel_rect)

    if not action_log_str or action_log_str.strip() == "":
        action_log_str = "No actions logged."

    y_offset = 10
    for line in action_log_str.splitlines():
        text_surface = small_font.render(line, True, SIDE_PANEL_TEXT_COLOR)
        screen.blit(text_surface, (grid_w + 5, y_offset))
        y_offset += text_surface.get_height() + 4


def draw(engine):
    """
    Draw the entire screen:
     - the board with walk and ability targets highlighted
     - food and animals
     - an info bar with round, scores and cooldowns
     - the side panel with the last action log
    """
    screen.fill(BLACK)
    size = engine.grid.size

    walk = set(engine.normal_move_targets())
    special = set(engine.special_move_targets())
    for x in range(size):
        for y in range(size):
            color = BOARD_COLOR
            if (x, y) in special:
                color = ABILITY_HIGHLIGHT
            elif (x, y) in walk:
                color = WALK_HIGHLIGHT
            draw_cell(x, y, color)

    for entity in engine.grid.entities():
        x, y = entity.position
        if isinstance(entity, Food):
            draw_cell(x, y, FOOD_COLOR, entity.symbol)
        else:
            draw_cell(x, y, ROLE_COLORS[entity.role], entity.symbol)

    draw_info(engine, board_width(size))
    ActionDraw(engine.action_log)
    pygame.display.flip()


def draw_info(engine, top):
    lines = [f"Round: {engine.current_round}/{engine.max_rounds}   Era: {engine.era.value}"]
    for label, animal in (("You", engine.player), ("Apex", engine.apex), ("Prey", engine.prey)):
        if animal is None:
            continue
        lines.append(f"{label}: {animal.name}  score {animal.score}  "
                     f"{animal.ability_name} {animal.cooldown}/{animal.max_cooldown}")
    if engine.is_game_over():
        lines[0] += f"   GAME OVER - winner: {engine.winner()}"

    y = top + 5
    for line in lines:
        surf = font.render(line, True, SIDE_PANEL_TEXT_COLOR)
        screen.blit(surf, (10, y))
        y += surf.get_height() + 2


def draw_cell(x, y, color, label=None):
    base_x = x * (CELL_SIZE + MARGIN) + MARGIN
    base_y = y * (CELL_SIZE + MARGIN) + MARGIN
    pygame.draw.rect(screen, color, (base_x, base_y, CELL_SIZE, CELL_SIZE))
    if label:
        text = font.render(label, True, TEXT_COLOR)
        screen.blit(text, text.get_rect(center=(base_x + CELL_SIZE // 2, base_y + CELL_SIZE // 2)))
