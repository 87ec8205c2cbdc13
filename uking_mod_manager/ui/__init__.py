"""UI package: tkinter views and the display-free presenter they share."""
