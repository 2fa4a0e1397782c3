import pygame


class PointerInput:
    """Turns a batch of pygame events into pointer positions.

    Only MOUSEMOTION moves the pointer and QUIT (closing the window) ends
    the loop. Every other event kind, keys included, is ignored.
    """

    def __init__(self):
        self.quit_requested = False

    # =====================================================
    # UPDATE (call once per frame with pygame.event.get())
    # =====================================================

    def update(self, events):
        """Process events; return the pointer positions seen, in order."""
        moves = []
        for event in events:
            if event.type == pygame.MOUSEMOTION:
                moves.append(pygame.Vector2(event.pos))
            elif event.type == pygame.QUIT:
                self.quit_requested = True
        return moves
