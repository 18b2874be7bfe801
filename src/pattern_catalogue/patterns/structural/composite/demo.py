"""Composite demo - a file system tree and a graphics scene."""
import sys

from pattern_catalogue.patterns.structural.composite.tree import Composite, Leaf


def main() -> int:
    print("=== Composite Pattern Demo - File System ===\n")

    root = Composite("root")
    documents = Composite("Documents")
    pictures = Composite("Pictures")
    work = Composite("Work")

    resume = Leaf("resume.pdf")
    photo1 = Leaf("vacation.jpg")
    photo2 = Leaf("family.png")
    project = Leaf("project.docx")
    report = Leaf("report.xlsx")

    print("Building file system structure:")
    root.add(documents)
    root.add(pictures)
    documents.add(resume)
    documents.add(work)
    pictures.add(photo1)
    pictures.add(photo2)
    work.add(project)
    work.add(report)

    print("\nFile system structure:")
    root.draw(0)

    print("\nRemoving vacation.jpg from Pictures:")
    pictures.remove(photo1)
    pictures.remove(photo1)
    resume.add(Leaf("notes.txt"))

    print("\nUpdated file system structure:")
    root.draw(0)

    print("\n\n=== Graphics Example ===")
    canvas = Composite("Canvas")
    shape_group = Composite("ShapeGroup")

    print("\nBuilding graphics structure:")
    canvas.add(shape_group)
    canvas.add(Leaf("Line"))
    shape_group.add(Leaf("Circle"))
    shape_group.add(Leaf("Rectangle"))
    shape_group.add(Leaf("Triangle"))

    print("\nGraphics structure:")
    canvas.draw(0)

    print("\nCleaning up file system...")
    # vacation.jpg was detached from the tree so it is released on its own
    released = photo1.destroy() + root.destroy()
    print(f"Released {released} components")
    print("Cleaning up graphics...")
    print(f"Released {canvas.destroy()} components")
    return 0


if __name__ == "__main__":
    sys.exit(main())
