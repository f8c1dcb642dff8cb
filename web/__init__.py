"""
web - Flask API для треугольного Peg Solitaire.
"""
