"""
Color constants for alignkit plotting.
"""

# =============================================================================
# NUCLEOTIDE COLORS
# =============================================================================

# Nucleotide colors (slightly lighter + more plain)
NT_COLOR = {
    "A": "#74AB86",  # soft green
    "C": "#6E93C0",  # soft blue
    "G": "#C19A5A",  # soft warm ochre
    "T": "#C26F6F",  # soft red
    "": "#000000",
}


# =============================================================================
# TRACEBACK PATH COLORS
# =============================================================================

PATH_COLORS = dict(
    path="#00ff2f",       # bright green marker edge
    background="black",   # halo behind the marker
    end_cell="#ffcc00",   # traceback start (best cell)
)


# =============================================================================
# HEATMAP COLORMAPS
# =============================================================================
HEATMAP_COLORMAPS = {
    'default': 'Reds',
    'diverging': 'RdBu_r',
}
