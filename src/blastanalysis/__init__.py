"""
Pressure-impulse (P-I) curve assessment for blast loading.

Classifies load points against one or more P-I boundary curves by testing
the segment from the origin to the load point.
"""
