"""
Adaptateurs pour les datasets IMDb.

Ce module fournit les implementations des outils externes du pipeline:
- Aria2Downloader: Telechargement multi-connexions via aria2c
- HttpDatasetDownloader: Telechargement en streaming via httpx
- PigzDecompressor: Decompression parallele via pigz
- ExternalLineSorter: Tri des lignes via sort (ordre des octets)
"""

from .aria2_downloader import Aria2Downloader
from .decompressor import PigzDecompressor
from .http_downloader import HttpDatasetDownloader
from .line_sorter import ExternalLineSorter

__all__ = [
    "Aria2Downloader",
    "HttpDatasetDownloader",
    "PigzDecompressor",
    "ExternalLineSorter",
]
