"""
Constantes globales pour MediaSort.

Ce module contient les constantes utilisees dans l'application:
- Datasets IMDb et URL de base
- Extensions media acceptees par le renommage
- Placeholders utilises quand un token est absent du nom de fichier
"""

# URL de base des datasets IMDb
IMDB_DATASETS_BASE_URL = "https://datasets.imdbws.com/"

# Datasets traites par le pipeline (sans extension)
IMDB_DATASET_NAMES = (
    "title.akas",
    "title.basics",
    "title.episode",
    "title.ratings",
)

# Extensions media acceptees (comparees en minuscules)
MEDIA_EXTENSIONS = ("mp4", "mkv")

# Placeholders des tokens manquants
UNKNOWN_QUALITY = "UNKNOWNp"
UNKNOWN_EPISODE = "SXXEXX"

# Parallelisme aria2c (-j/-x/-s), 16 est le maximum de connexions par serveur
ARIA2C_MAX_CONNECTIONS = 16
