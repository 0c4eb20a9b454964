# seamdeck

The package holds two small, self-contained tools:

- **`seamdeck.cv`** shrinks images with *seam carving*. It removes paths of
  pixels with the lowest energy. The important parts of a picture keep their
  shape, and the less interesting parts get narrower or shorter.
- **`seamdeck.euchre`** plays the trick-taking card game Euchre for four
  players. Each player is either a scripted "Simple" player or a "Human"
  player who answers prompts on standard input.

## Installation

```
pip install .
```

This also installs Pillow, which the package uses only to read and write
JPEG files. The seam carver itself works on plain-text PPM (`P3`) images.

To run the test suite:

```
pip install ".[test]"
pytest
```

## Resizing images

```
seamdeck-resize IN_FILENAME OUT_FILENAME WIDTH [HEIGHT]
```

`IN_FILENAME` must be a plain PPM (`P3`) image without comments. Any
whitespace may separate the numbers. The result is written to
`OUT_FILENAME` in the same format. If you leave out `HEIGHT`, the original
height is kept.

The command exits with status 1 in these cases:

- The number of arguments is wrong, or `WIDTH` and `HEIGHT` are not whole
  numbers. The command prints a usage message.
- `WIDTH` or `HEIGHT` is not positive, or is larger than the original size.
  The command prints a usage message.
- A file cannot be opened. The command prints `Error opening file: NAME`.

This example narrows `horses.ppm` to 400 columns and 250 rows:

```
seamdeck-resize horses.ppm horses_small.ppm 400 250
```

### From Python

You can use the building blocks on their own:

- `seamdeck.cv.matrix.Matrix` is a grid of integers, indexed as
  `matrix[row, column]`. It offers `fill`, `fill_border`, `max`,
  `column_of_min_value_in_row`, `min_value_in_row` and `write`.
- `seamdeck.cv.image.Image` holds an RGB picture, indexed as
  `image[row, column]`, and each element is a `seamdeck.cv.image.Pixel`.
  - `Image.read(stream)` parses PPM text.
  - `image.write(stream)` and `str(image)` produce PPM text.
  - `image.copy()` returns an independent copy.
- `seamdeck.cv.processing` provides the algorithm one step at a time. Every
  function returns a new image or matrix and leaves its input unchanged.
  - `rotate_left` and `rotate_right`
  - `compute_energy_matrix` and `compute_vertical_cost_matrix`
  - `find_minimal_vertical_seam` and `remove_vertical_seam`
  - `seam_carve_width`, `seam_carve_height` and `seam_carve`
- `seamdeck.cv.jpeg` converts between JPEG files and `Image` objects:
  - `has_jpeg_extension(filename)` checks the file name.
  - `read_jpeg(filename)` returns an `Image`.
  - `write_jpeg(image, filename, high_quality=False)` writes a JPEG file.

```python
from seamdeck.cv.image import Image
from seamdeck.cv.processing import seam_carve

with open("dog.ppm") as stream:
    img = Image.read(stream)
smaller = seam_carve(img, 4, 5)
print(smaller)  # PPM text: "P3", then "WIDTH HEIGHT", then "255", then the rows
```

## Playing Euchre

```
seamdeck-euchre PACK_FILENAME [shuffle|noshuffle] POINTS_TO_WIN NAME1 TYPE1 NAME2 TYPE2 NAME3 TYPE3 NAME4 TYPE4
```

The arguments are:

- `PACK_FILENAME`: a file listing the 24 cards of the pack, written like
  `Nine of Spades` and separated by whitespace.
- `shuffle` or `noshuffle`: `shuffle` in-shuffles the pack seven times
  before every hand. `noshuffle` deals the pack in file order every hand.
- `POINTS_TO_WIN`: a number between 1 and 100.
- `TYPE1` to `TYPE4`: each is `Simple` or `Human`.

Players 1 and 3 form one team, and players 2 and 4 form the other.

The game prints the command line first. During play it prints every deal,
every trump decision and every card played, and after each hand it prints
the score. Play continues until one team has reached the target and has
more points than the other team. The game then announces the winners.

If an argument is invalid, the command prints a usage message and exits with
status 1. It does the same with an error message when the pack file cannot
be opened or read.

```
seamdeck-euchre pack.in noshuffle 10 Adi Simple Barbara Simple Chi-Chih Simple Dabbala Simple
```

### From Python

```python
from seamdeck.euchre.card import Card, Suit, suit_next

card = Card.parse("Jack of Diamonds")
print(card)                              # Jack of Diamonds
print(card.is_left_bower(Suit.HEARTS))   # True
print(suit_next(Suit.SPADES))            # Clubs
```

The other parts of `seamdeck.euchre` are:

- `seamdeck.euchre.pack.Pack` deals cards with `deal_one`, starts over with
  `reset` and in-shuffles with `shuffle`. `Pack.from_stream` reads a pack
  from text.
- `seamdeck.euchre.player.player_factory(name, strategy)` creates a
  `SimplePlayer` or a `HumanPlayer`.
- `seamdeck.euchre.game.Game` plays one hand at a time with `play_hand`. Its
  `points` attribute holds the score of each team.

## What the package does not do

- `seamdeck-resize` reads and writes PPM files only. JPEG files are handled
  only through the functions in `seamdeck.cv.jpeg`, not by the command.
- The PPM reader does not accept comments in the file.
- There is no graphical interface for either tool.