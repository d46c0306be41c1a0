"""
The MODEL layer contains pure data structures and geometric predicates.
It has NO knowledge of the command line or the demo driver.
It deals with Points, Curves and their intersection tests.
"""
