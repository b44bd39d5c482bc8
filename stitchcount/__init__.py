"""Two-digit tally counter for knitting rows and stitches."""
