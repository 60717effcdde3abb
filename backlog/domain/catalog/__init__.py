"""
Catalog bounded context, domain layer.

Franchises, publishers, developers, genres, platforms and games,
plus the user-owned playlists, reviews and comments built on top.
"""
