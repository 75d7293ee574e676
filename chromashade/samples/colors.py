# Reference values for normalized sRGB primaries, D65, 2 degree observer
# RED
RED_RGB = (1.0, 0.0, 0.0)
RED_XYZ = (0.4124564, 0.2126729, 0.0193339)
RED_LAB = (53.2408, 80.0925, 67.2032)
RED_HSL = (0.0, 1.0, 0.5)

# GREEN
GREEN_RGB = (0.0, 1.0, 0.0)
GREEN_XYZ = (0.3575761, 0.7151522, 0.1191920)
GREEN_LAB = (87.7347, -86.1827, 83.1793)
GREEN_HSL = (120.0, 1.0, 0.5)

# BLUE
BLUE_RGB = (0.0, 0.0, 1.0)
BLUE_XYZ = (0.1804375, 0.0721750, 0.9503041)
BLUE_LAB = (32.2970, 79.1875, -107.8602)
BLUE_HSL = (240.0, 1.0, 0.5)

# WHITE
WHITE_RGB = (1.0, 1.0, 1.0)
WHITE_XYZ = (0.95047, 1.0, 1.08883)
WHITE_LAB = (100.0, 0.0, 0.0)
WHITE_HSL = (0.0, 0.0, 1.0)

# BLACK
BLACK_RGB = (0.0, 0.0, 0.0)
BLACK_XYZ = (0.0, 0.0, 0.0)
BLACK_LAB = (0.0, 0.0, 0.0)
BLACK_HSL = (0.0, 0.0, 0.0)

samples_rgb_xyz = {
    RED_RGB: RED_XYZ,
    GREEN_RGB: GREEN_XYZ,
    BLUE_RGB: BLUE_XYZ,
    WHITE_RGB: WHITE_XYZ,
    BLACK_RGB: BLACK_XYZ,
}

samples_rgb_lab = {
    RED_RGB: RED_LAB,
    GREEN_RGB: GREEN_LAB,
    BLUE_RGB: BLUE_LAB,
    WHITE_RGB: WHITE_LAB,
    BLACK_RGB: BLACK_LAB,
}

samples_rgb_hsl = {
    RED_RGB: RED_HSL,
    GREEN_RGB: GREEN_HSL,
    BLUE_RGB: BLUE_HSL,
    WHITE_RGB: WHITE_HSL,
    BLACK_RGB: BLACK_HSL,
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (0.5, 0.25, 0.25): (0.0, 1.0 / 3.0, 0.375),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
}

# Sharma, Wu & Dalal (2005) CIEDE2000 test pairs: (lab1, lab2, delta_e)
samples_ciede2000 = [
    ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
    ((50.0, 3.1571, -77.2803), (50.0, 0.0, -82.7485), 2.8615),
    ((50.0, 2.8361, -74.0200), (50.0, 0.0, -82.7485), 3.4412),
    ((50.0, -1.3802, -84.2814), (50.0, 0.0, -82.7485), 1.0000),
    ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
    ((50.0, -1.0, 2.0), (50.0, 0.0, 0.0), 2.3669),
    ((50.0, 2.49, -0.001), (50.0, -2.49, 0.0009), 7.1792),
    ((50.0, 2.49, -0.001), (50.0, -2.49, 0.0011), 7.2195),
    ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
    ((50.0, 2.5, 0.0), (61.0, -5.0, 29.0), 22.8977),
    ((50.0, 2.5, 0.0), (56.0, -27.0, -3.0), 31.9030),
    ((50.0, 2.5, 0.0), (58.0, 24.0, 15.0), 19.4535),
    ((60.2574, -34.0099, 36.2677), (60.4626, -34.1751, 39.4387), 1.2644),
    ((63.0109, -31.0961, -5.8663), (62.8187, -29.7946, -4.0864), 1.2630),
]
