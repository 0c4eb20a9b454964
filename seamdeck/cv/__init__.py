"""Integer matrices, RGB images in PPM and JPEG form, and seam-carving resizing."""