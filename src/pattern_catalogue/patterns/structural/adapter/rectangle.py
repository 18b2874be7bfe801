"""Class adapter mapping (x, y, width, height) onto a corner-based legacy API."""


class LegacyRectangle:
    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int) -> None:
        print(f"Legacy Rectangle drawn from ({x1},{y1}) to ({x2},{y2})")


class RectangleAdapter(LegacyRectangle):
    def draw(self, x: int, y: int, width: int, height: int) -> None:
        self.draw_rectangle(x, y, x + width, y + height)
