"""
Constantes partagees de VidCatalog.
"""

# Identifiants YouTube utilises par defaut par la commande seed
DEFAULT_SEED_VIDEO_IDS: tuple[str, ...] = (
    "dQw4w9WgXcQ",  # Rick Astley - Never Gonna Give You Up
    "jNQXAC9IVRw",  # Me at the zoo
    "9bZkp7q19f0",  # PSY - GANGNAM STYLE
    "OPf0YbXqDm0",  # Mark Ronson - Uptown Funk ft. Bruno Mars
    "kJQP7kiw5Fk",  # Luis Fonsi - Despacito ft. Daddy Yankee
    "RgKAFK5djSk",  # Wiz Khalifa - See You Again ft. Charlie Puth
    "YQHsXMglC9A",  # Adele - Hello
    "AJtDXIazrMo",  # Ed Sheeran - Shape of You
    "CevxZvSJLk8",  # Katy Perry - Roar
    "ZyhrYis509A",  # Taylor Swift - Shake It Off
)
