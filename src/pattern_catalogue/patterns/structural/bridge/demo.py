"""Bridge demo - the same shapes through OpenGL and DirectX, then a live backend swap."""
import sys

from pattern_catalogue.patterns.structural.bridge.renderers import DirectXRenderer, OpenGLRenderer
from pattern_catalogue.patterns.structural.bridge.shapes import Circle, Line, Rectangle


def main() -> int:
    print("=== Bridge Pattern Demo - Graphics Rendering ===\n")
    opengl = OpenGLRenderer()
    directx = DirectXRenderer()

    print("1. Creating shapes with OpenGL renderer:")
    circle_gl = Circle(opengl, 10.0, 20.0, 5.0)
    rect_gl = Rectangle(opengl, 30.0, 40.0, 15.0, 10.0)
    circle_gl.draw()
    rect_gl.draw()

    print("\n2. Creating shapes with DirectX renderer:")
    circle_dx = Circle(directx, 50.0, 60.0, 8.0)
    rect_dx = Rectangle(directx, 70.0, 80.0, 20.0, 12.0)
    circle_dx.draw()
    rect_dx.draw()

    print("\n3. Moving and resizing shapes:")
    circle_gl.move(5.0, 3.0)
    circle_gl.draw()
    rect_dx.resize(1.5)
    rect_dx.draw()

    print("\n4. Switching renderer for existing shape:")
    print("Switching circle to DirectX renderer:")
    circle_gl.set_renderer(directx)
    circle_gl.draw()

    print("\n5. Drawing a line with both renderers:")
    line = Line(opengl, 0.0, 0.0, 10.0, 10.0)
    line.draw()
    line.set_renderer(directx)
    line.draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())
