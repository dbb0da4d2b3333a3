"""Basic palettica usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from palettica import (
    Color,
    generate,
    generate_all,
    color_palette,
    color_palette_dark,
    get_preset_colors,
    render_swatch,
)


def demonstrate_palettes() -> None:
    # One entry at a time, light and dark.
    print("Seed:", color_palette("#1890ff", 6))
    print("Lightest (1):", color_palette("#1890ff", 1))
    print("Darkest (10):", color_palette("#1890ff", 10, "rgb"))
    print("Dark-mode base:", color_palette_dark("#1890ff", 6, "hsl"))

    # Whole ramps.
    print("Light ramp:", generate_all("#1890ff"))
    print("Dark ramp:", generate_all("#1890ff", dark=True))

    # Tagged result: Single or Many.
    result = generate("#1890ff", list=True, format="rgb")
    print(type(result).__name__, len(result))


def demonstrate_colors() -> None:
    seed = Color("hsl(200, 80%, 45%)")
    print("HSV:", seed.hue, seed.saturationv, seed.brightness)
    print("Hex:", seed.hex())


def demonstrate_presets() -> None:
    presets = get_preset_colors()
    for name, preset in presets.items():
        print(f"{name:>10}: {' '.join(preset.light)}")


if __name__ == "__main__":
    demonstrate_palettes()
    demonstrate_colors()
    demonstrate_presets()
    render_swatch(generate_all("#165DFF")).save("arcoblue_swatch.png")
