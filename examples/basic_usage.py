"""Basic conica usage examples.

Run directly with:
    python examples/basic_usage.py

Saving images needs Pillow (``pip install conica[examples]``).
"""
import numpy as np

from conica import (
    AngleGradientSampler,
    ChannelLayout,
    CycleMode,
    DragGeometry,
    EndpointColors,
    fill_angle_gradient,
    render_angle_gradient,
)


def demonstrate_sampler() -> None:
    # One sampler, queried point by point and over a window.
    drag = DragGeometry(0, 0, 10, 0)
    colors = EndpointColors((0, 0, 0), (255, 255, 255))
    sampler = AngleGradientSampler(drag, colors, CycleMode.REFLECT)
    print("t behind the start point:", sampler.interpolate(-5, 0))
    print("RGBA behind the start point:", sampler.sample(-5, 0))
    print("Window shape:", sampler.render(-8, -8, 16, 16).shape)


def demonstrate_cycle_modes() -> None:
    # Render each cycle mode and save it as a PNG.
    from PIL import Image

    drag = DragGeometry(200, 200, 320, 140)
    for mode in CycleMode:
        pixels = render_angle_gradient(
            drag,
            (255, 64, 0, 255),
            (20, 40, 220, 255),
            mode,
            width=400,
            height=400,
            num_threads=4,
        )
        Image.fromarray(pixels, mode="RGBA").save(f"angle_{mode.value}.png")
        print(f"Saved angle_{mode.value}.png")


def demonstrate_mask_fill() -> None:
    # Single-channel buffers (e.g. layer masks) take the gray path.
    mask = np.zeros((256, 256), dtype=np.uint8)
    drawn = fill_angle_gradient(mask, DragGeometry(128, 128, 128, 20), (0, 0, 0), (255, 255, 255), "Repeat")
    print("Mask filled:", drawn, "mean value:", mask.mean())

    # A click draws nothing.
    untouched = fill_angle_gradient(mask, DragGeometry(5, 5, 5, 5), (0, 0, 0), (255, 255, 255), "Repeat")
    print("Click filled:", untouched)

    gray = render_angle_gradient(
        DragGeometry(64, 64, 100, 64), (0, 0, 0), (255, 255, 255), "No Cycle",
        width=128, height=128, layout=ChannelLayout.GRAY, invert=True,
    )
    print("Inverted gray corner:", gray[0, 0])


if __name__ == "__main__":
    demonstrate_sampler()
    demonstrate_mask_fill()
    demonstrate_cycle_modes()
