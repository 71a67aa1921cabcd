"""Site Geometry Engine.

Validates user- and template-drawn polygon rings (site boundaries, zones,
pitches) and derives their area, perimeter and centroid. The same code
backs both the advisory editor check and the authoritative check that runs
before an area-bearing record is persisted.
"""

__version__ = "0.1.0"
