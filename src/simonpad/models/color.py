"""Color model for pad rendering."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import PadColor


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so it can be used as a dictionary value in
    module-level palettes without risk of mutation.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


# Display colors used by the terminal UI
PAD_COLORS: dict[PadColor, Color] = {
    PadColor.GREEN: Color(r=0, g=200, b=83),
    PadColor.RED: Color(r=229, g=57, b=53),
    PadColor.YELLOW: Color(r=253, g=216, b=53),
    PadColor.BLUE: Color(r=30, g=136, b=229),
}
