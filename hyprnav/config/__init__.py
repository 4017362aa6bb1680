"""
hyprnav.config - Configuracion de hyprnav.

    - settings : Settings resueltos desde el entorno en el punto de entrada
    - defaults : Conjuntos de teclas por defecto
"""
