"""A height-grid surface mesh with affine transforms and isometric projection."""