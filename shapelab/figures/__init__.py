"""Plane figures, their collection and the interactive figures console."""