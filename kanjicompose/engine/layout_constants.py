"""Layout tuning constants.

The side offsets and enclosure ratios are empirical visual tuning values;
none of them follows from the rest of the model.
"""

# Edge length of a freshly reset composite, and of any part's own square
BASE_LOGICAL_SIZE = 200

# Visual area of a freshly reset composite (BASE_LOGICAL_SIZE squared)
BASE_AREA = 40000

# Side attachments: extra logical length appended on the given side.
ADD_RIGHT_EXTENT = 300
ADD_LEFT_EXTENT = 120
ADD_TOP_EXTENT = 150
ADD_BOTTOM_EXTENT = 150

# NYOU (shinnyou): the composite keeps its size inside a square grown to
# current / 0.7, pushed right by the growth and down by 10% of the new side.
NYOU_INNER_RATIO = 0.7
NYOU_TOP_OFFSET = 0.1

# ENCLOSE (kunigamae): grow by a fixed margin, centre the composite, and
# overdraw the enclosure so its 200-unit frame lands just outside the content.
ENCLOSE_MARGIN = 70
ENCLOSE_FRAME_SCALE = 1.4

# ENCLOSE_GATE (mongamae): the composite shrinks to half the new side,
# centred horizontally and starting 45% down, inside a square of current / 0.75.
GATE_INNER_RATIO = 0.75
GATE_CONTENT_SCALE = 0.5
GATE_TOP_OFFSET = 0.45

# TRIANGLE (shinajikei): side doubles, three copies of the part at half size.
TRIANGLE_SCALE = 2
TRIANGLE_COPIES = 3
