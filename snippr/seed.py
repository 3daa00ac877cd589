"""
Snippr - Seed Data
====================

The eight snippets every fresh store starts with (ids 1-8). Any id minted by
SnippetStore.create() is therefore 9 or higher.
"""

from typing import Tuple

from snippr.models.snippet import Snippet

SEED_SNIPPETS: Tuple[Snippet, ...] = (
    Snippet(1, "Python", "print('Hello, World!')"),
    Snippet(2, "Python", "def add(a, b):\n    return a + b"),
    Snippet(
        3,
        "Python",
        "class Circle:\n"
        "    def __init__(self, radius):\n"
        "        self.radius = radius\n"
        "\n"
        "    def area(self):\n"
        "        return 3.14 * self.radius ** 2",
    ),
    Snippet(4, "JavaScript", "console.log('Hello, World!');"),
    Snippet(5, "JavaScript", "function multiply(a, b) {\n    return a * b;\n}"),
    Snippet(6, "JavaScript", "const square = num => num * num;"),
    Snippet(
        7,
        "Java",
        "public class HelloWorld {\n"
        "    public static void main(String[] args) {\n"
        "        System.out.println(\"Hello, World!\");\n"
        "    }\n"
        "}",
    ),
    Snippet(
        8,
        "Java",
        "public class Rectangle {\n"
        "    private int width;\n"
        "    private int height;\n"
        "\n"
        "    public Rectangle(int width, int height) {\n"
        "        this.width = width;\n"
        "        this.height = height;\n"
        "    }\n"
        "\n"
        "    public int getArea() {\n"
        "        return width * height;\n"
        "    }\n"
        "}",
    ),
)
