"""
Constant tables for the piece-based 3x3x3 cube.

The cube is stored as three planes of nine pieces. Plane 0 is nearest the viewer (front) and plane 2 is
furthest (back). Within a plane, pieces are indexed row-major as seen from the front:

        +--+--+--+
        |0 |1 |2 |
        +--+--+--+
        |3 |4 |5 |
        +--+--+--+
        |6 |7 |8 |
        +--+--+--+

Every piece has six facet slots, one per side direction, in the order below. A slot holds the color of the
sticker pointing that way, or empty.
"""

# facet slots / sides
TOP, FRONT, RIGHT, LEFT, BACK, BOTTOM = range(6)

# colors
E, W, R, B, G, O, Y = range(7)

NUM_PLANES: int = 3
PIECES_PER_PLANE: int = 9
NUM_SLOTS: int = 6
PIECES_PER_QUADSET: int = 4

# solved cube: top white, front red, right blue, left green, back orange, bottom yellow
# slot order: top, front, right, left, back, bottom
SOLVED_PIECES = [
    # plane 0 (front)
    [[W, R, E, G, E, E], [W, R, E, E, E, E], [W, R, B, E, E, E],
     [E, R, E, G, E, E], [E, R, E, E, E, E], [E, R, B, E, E, E],
     [E, R, E, G, E, Y], [E, R, E, E, E, Y], [E, R, B, E, E, Y]],
    # plane 1 (middle)
    [[W, E, E, G, E, E], [W, E, E, E, E, E], [W, E, B, E, E, E],
     [E, E, E, G, E, E], [E, E, E, E, E, E], [E, E, B, E, E, E],
     [E, E, E, G, E, Y], [E, E, E, E, E, Y], [E, E, B, E, E, Y]],
    # plane 2 (back)
    [[W, E, E, G, O, E], [W, E, E, E, O, E], [W, E, B, E, O, E],
     [E, E, E, G, O, E], [E, E, E, E, O, E], [E, E, B, E, O, E],
     [E, E, E, G, O, Y], [E, E, E, E, O, Y], [E, E, B, E, O, Y]],
]

# (plane, index) pairs visited when reading a face, row-major as seen when facing that side.
# the slot read is the side itself.
FACE_GATHER = {
    TOP: [(2, 0), (2, 1), (2, 2),
          (1, 0), (1, 1), (1, 2),
          (0, 0), (0, 1), (0, 2)],
    FRONT: [(0, 0), (0, 1), (0, 2),
            (0, 3), (0, 4), (0, 5),
            (0, 6), (0, 7), (0, 8)],
    RIGHT: [(0, 2), (1, 2), (2, 2),
            (0, 5), (1, 5), (2, 5),
            (0, 8), (1, 8), (2, 8)],
    LEFT: [(2, 0), (1, 0), (0, 0),
           (2, 3), (1, 3), (0, 3),
           (2, 6), (1, 6), (0, 6)],
    # seen from behind, so columns run right to left relative to the front
    BACK: [(2, 2), (2, 1), (2, 0),
           (2, 5), (2, 4), (2, 3),
           (2, 8), (2, 7), (2, 6)],
    BOTTOM: [(0, 6), (0, 7), (0, 8),
             (1, 6), (1, 7), (1, 8),
             (2, 6), (2, 7), (2, 8)],
}

# Pieces turned with each side. Listed in clockwise order: a clockwise turn moves the piece at
# position k to position k + 1.
CORNER_QUADSETS = {
    TOP: [(0, 0), (2, 0), (2, 2), (0, 2)],
    FRONT: [(0, 0), (0, 2), (0, 8), (0, 6)],
    RIGHT: [(0, 2), (2, 2), (2, 8), (0, 8)],
    LEFT: [(0, 0), (0, 6), (2, 6), (2, 0)],
    BACK: [(2, 0), (2, 6), (2, 8), (2, 2)],
    BOTTOM: [(0, 6), (0, 8), (2, 8), (2, 6)],
}

EDGE_QUADSETS = {
    TOP: [(0, 1), (1, 0), (2, 1), (1, 2)],
    FRONT: [(0, 1), (0, 5), (0, 7), (0, 3)],
    RIGHT: [(1, 2), (2, 5), (1, 8), (0, 5)],
    LEFT: [(1, 0), (0, 3), (1, 6), (2, 3)],
    BACK: [(2, 1), (2, 3), (2, 7), (2, 5)],
    BOTTOM: [(0, 7), (1, 8), (2, 7), (1, 6)],
}

# Facet slots perpendicular to the turn axis, in clockwise order: on a clockwise turn the sticker in slot k
# ends up pointing towards slot k + 1. The turned side and its opposite keep their slots.
FACET_CYCLES = {
    TOP: [FRONT, LEFT, BACK, RIGHT],
    FRONT: [TOP, RIGHT, BOTTOM, LEFT],
    RIGHT: [TOP, BACK, BOTTOM, FRONT],
    LEFT: [TOP, FRONT, BOTTOM, BACK],
    BACK: [TOP, LEFT, BOTTOM, RIGHT],
    BOTTOM: [FRONT, RIGHT, BACK, LEFT],
}
