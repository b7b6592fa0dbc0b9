"""georegion: zone-aware projection and planar polygon algebra for WGS84.

Geographic geometry (longitude/latitude) is projected into a local UTM zone,
operated on with exact planar algorithms, and projected back.
"""

__version__ = "0.1.0"
