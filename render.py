import pygame

from simulation import BALL_RADIUS, PADDLE_HEIGHT, PADDLE_THICKNESS, WINNING_SCORE

FONT_NAME = "arial"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

NET_SPACING = 40
NET_DASH = 20


class PygameSurface:
    """Drawing primitives over a pygame display surface."""

    def __init__(self, screen, font_size=18):
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.font = pygame.font.SysFont(FONT_NAME, font_size)

    def color_rect(self, x, y, w, h, color):
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def color_circle(self, cx, cy, r, color):
        pygame.draw.circle(self.screen, color, (int(cx), int(cy)), int(r))

    def fill_text(self, text, x, y, color=WHITE):
        self.screen.blit(self.font.render(str(text), True, color), (int(x), int(y)))


def draw_net(surface):
    for y in range(0, int(surface.height), NET_SPACING):
        surface.color_rect(surface.width / 2 - 1, y, 2, NET_DASH, WHITE)


def draw_win_screen(surface, state):
    if state.score_human >= WINNING_SCORE:
        surface.fill_text("Left Player Won", 350, 200, WHITE)
    elif state.score_computer >= WINNING_SCORE:
        surface.fill_text("Right Player Won", 350, 200, WHITE)
    surface.fill_text("click to continue", 350, 500, WHITE)


def draw_everything(surface, state):
    # blank out the board
    surface.color_rect(0, 0, surface.width, surface.height, BLACK)

    if state.winning:
        draw_win_screen(surface, state)
        return

    draw_net(surface)
    surface.color_rect(0, state.paddle_human, PADDLE_THICKNESS, PADDLE_HEIGHT, WHITE)
    surface.color_rect(surface.width - PADDLE_THICKNESS, state.paddle_computer,
                       PADDLE_THICKNESS, PADDLE_HEIGHT, WHITE)
    surface.color_circle(state.ball.x, state.ball.y, BALL_RADIUS, WHITE)

    surface.fill_text(state.score_human, 100, 100, WHITE)
    surface.fill_text(state.score_computer, surface.width - 100, 100, WHITE)
