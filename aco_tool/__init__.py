"""aco-tool: convert Photoshop ACO swatch files to GIMP palettes."""
