# rgb (0-255) -> hsv (degrees, %, %)
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (0, 255, 0): (120.0, 100.0, 100.0),
    (0, 0, 255): (240.0, 100.0, 100.0),
    (255, 255, 0): (60.0, 100.0, 100.0),
    (0, 255, 255): (180.0, 100.0, 100.0),
    (255, 0, 255): (300.0, 100.0, 100.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 50.196078),
    (24, 144, 255): (208.831169, 90.588235, 100.0),
    (255, 128, 0): (30.117647, 100.0, 100.0),
}

# rgb (0-255) -> hsl (degrees, %, %)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 0, 255): (300.0, 100.0, 50.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 50.196078),
    (24, 144, 255): (208.831169, 100.0, 54.705882),
    (255, 128, 0): (30.117647, 100.0, 50.0),
}

# Seeds used across palette tests
seed_colors = [
    "#1890ff",
    "#F53F3F",
    "#00B42A",
    "#14C9C9",
    "#722ED1",
    "#FADC19",
    "#6b7785",
    "#000000",
    "#ffffff",
    "hsl(75, 60%, 40%)",
    "orange",
]
