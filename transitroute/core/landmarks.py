"""
Built-in Vienna landmark catalogue
Named route endpoints for the CLI and for fallback display names
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import Coordinate


class Landmark(BaseModel):
    """Named place usable as a route endpoint"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Catalogue identifier")
    name: str = Field(description="Display name")
    address: str = Field(description="Street address")
    coordinate: Coordinate = Field(description="Position")


def _landmark(landmark_id: int, name: str, address: str, lat: float, lng: float) -> Landmark:
    return Landmark(
        id=landmark_id, name=name, address=address, coordinate=Coordinate.from_lat_lng(lat, lng)
    )


VIENNA_LANDMARKS: List[Landmark] = [
    _landmark(1, "Pomnik feldmarszałka Schwarzenberga", "Schwarzenbergplatz, 1010 Wien", 48.198579, 16.377638),
    _landmark(2, "Pałac Habsburgów (Hofburg)", "Michaelerplatz 1, 1010 Wien", 48.206466, 16.365477),
    _landmark(3, "Belvedere Palace", "Prinz-Eugen-Straße 27, 1030 Wien", 48.191433, 16.380888),
    _landmark(4, "Muzeum Armii Austriackiej (Heeresgeschichtliches Museum)", "Arsenalstraße 1, 1030 Wien", 48.185435, 16.394493),
    _landmark(5, "Miejsce Bitwy pod Wiedniem (Kahlenberg)", "Am Kahlenberg, 1190 Wien", 48.270898, 16.345320),
    _landmark(6, "Türkenschanzpark", "Türkenschanzpark, 1180 Wien", 48.232324, 16.316593),
    _landmark(7, "Kolumna Trójcy Świętej", "Graben, 1010 Wien", 48.209067, 16.370135),
    _landmark(8, "Budynek Parlamentu", "Dr.-Karl-Renner-Ring 3, 1017 Wien", 48.210033, 16.359951),
    _landmark(9, "Schlosspark Schönbrunn", "Schönbrunner Schloßstraße 47, 1130 Wien", 48.184516, 16.312222),
    _landmark(10, "Ratusz", "Rathausplatz, 1010 Wien", 48.210447, 16.357735),
    _landmark(11, "Katedra św. Szczepana", "Stephansplatz 3, 1010 Wien", 48.208174, 16.373819),
    _landmark(12, "Vienna Museum", "Karlsplatz 8, 1040 Wien", 48.199311, 16.370782),
    _landmark(13, "Dworzec Autobusowy", "48°11'38\"N 16°24'33\"E", 48.194444, 16.409167),
]


def find_landmark(query: str, landmarks: Optional[List[Landmark]] = None) -> Optional[Landmark]:
    """
    Find a landmark by catalogue id or name

    Args:
        query: Numeric id or case-insensitive name fragment
        landmarks: Catalogue to search, defaults to VIENNA_LANDMARKS

    Returns:
        First matching landmark or None
    """
    catalogue = VIENNA_LANDMARKS if landmarks is None else landmarks
    query = query.strip()
    if not query:
        return None

    if query.isdigit():
        landmark_id = int(query)
        return next((lm for lm in catalogue if lm.id == landmark_id), None)

    needle = query.casefold()
    exact = next((lm for lm in catalogue if lm.name.casefold() == needle), None)
    if exact:
        return exact

    return next((lm for lm in catalogue if needle in lm.name.casefold()), None)
