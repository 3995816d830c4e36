# Expected values follow the integer kernels: hue in degrees, s/v/l in
# percent, rgb in bytes, everything rounded half up.

samples_rgb_hsv = {
    (255, 0, 0): (0, 100, 100),
    (0, 255, 0): (120, 100, 100),
    (0, 0, 255): (240, 100, 100),
    (255, 255, 0): (60, 100, 100),
    (0, 255, 255): (180, 100, 100),
    (255, 0, 255): (300, 100, 100),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50),
    (255, 128, 0): (30, 100, 100),
    (255, 153, 51): (30, 80, 100),
    (51, 102, 153): (210, 67, 60),
}

samples_hsv_rgb = {
    (0, 100, 100): (255, 0, 0),
    (120, 100, 100): (0, 255, 0),
    (240, 100, 100): (0, 0, 255),
    (60, 100, 100): (255, 255, 0),
    (180, 100, 100): (0, 255, 255),
    (300, 100, 100): (255, 0, 255),
    (0, 0, 100): (255, 255, 255),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 50): (128, 128, 128),
    (30, 80, 100): (255, 153, 51),
    (210, 67, 60): (50, 102, 153),
}

samples_hsv_hsl = {
    (0, 100, 100): (0, 100, 50),
    (0, 0, 100): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 50): (0, 0, 50),
    (120, 67, 75): (120, 50, 50),
    (200, 40, 80): (200, 44, 64),
}

samples_hsl_hsv = {
    (0, 100, 50): (0, 100, 100),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 100): (0, 0, 100),
    (120, 50, 50): (120, 67, 75),
    (200, 0, 40): (200, 0, 40),
    # black: saturation has nothing to act on
    (0, 50, 0): (0, 0, 0),
}

# Every channel a multiple of 85 (thirds of the byte range)
rgb_thirds_grid = [
    (r, g, b)
    for r in (0, 85, 170, 255)
    for g in (0, 85, 170, 255)
    for b in (0, 85, 170, 255)
]


def hsv(h, s, v):
    return {"h": h, "s": s, "v": v}


def rgb(r, g, b):
    return {"r": r, "g": g, "b": b}


def hsl(h, s, l):
    return {"h": h, "s": s, "l": l}
