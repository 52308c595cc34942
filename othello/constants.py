"""Constants for the Othello rules engine."""

### Board
BOARD_DIM = 8
NUM_CELLS = BOARD_DIM * BOARD_DIM
DIRECTIONS = [(i, j) for i in [-1, 0, 1] for j in [-1, 0, 1] if not (i == 0 and j == 0)]
INITIAL_SCORE = 2

### Cell codes stored in the board array
WHITE = 1
BLACK = -1
EMPTY = 0

### Algebraic notation: column letter then row number, "d3" -> (2, 3)
letters = "abcdefgh"
number = "12345678"

tuple2move = {(i, j): letters[j] + number[i] for i in range(BOARD_DIM) for j in range(BOARD_DIM)}

move2tuple = {letters[j] + number[i]: (i, j) for i in range(BOARD_DIM) for j in range(BOARD_DIM)}

SQUARES = list(move2tuple.keys())
