"""
Couche application (services).

- filename_classifier : decoupage et classification des noms de fichiers media
- media_renamer : renommage des fichiers media d'un repertoire
- dataset_pipeline : telechargement, decompression et tri des datasets IMDb
"""
