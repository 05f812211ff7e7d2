# transporte/utils/validacion.py

import math
from numbers import Real


class DatosInvalidos(ValueError):
    """Entrada rechazada antes de llegar al método; el mensaje va al usuario."""


def _validar_numeros(valores, nombre):
    for v in valores:
        # bool es subclase de int, pero no es una cantidad
        if isinstance(v, bool) or not isinstance(v, Real):
            raise DatosInvalidos(f"'{nombre}' solo admite números.")
        # los int de Python son exactos y siempre finitos; isfinite los
        # convertiría a float y desbordaría con valores muy grandes
        if isinstance(v, float) and not math.isfinite(v):
            raise DatosInvalidos(f"'{nombre}' contiene valores no finitos.")
        if v < 0:
            raise DatosInvalidos(f"'{nombre}' no admite valores negativos.")


def validar_problema(costos, oferta, demanda, max_dimension=None, solo_balanceados=False):
    """
    Verifica forma y valores de un problema de transporte.
    Lanza DatosInvalidos con un mensaje legible en el primer error encontrado.
    """
    if not isinstance(costos, list) or not isinstance(oferta, list) or not isinstance(demanda, list):
        raise DatosInvalidos("costos, oferta y demanda deben ser listas.")

    if not oferta or not demanda:
        raise DatosInvalidos("oferta y demanda no pueden estar vacías.")

    if max_dimension is not None and (len(oferta) > max_dimension or len(demanda) > max_dimension):
        raise DatosInvalidos(f"Se admiten como máximo {max_dimension} orígenes y destinos.")

    if len(costos) != len(oferta):
        raise DatosInvalidos("Las filas de 'costos' deben coincidir con el tamaño de 'oferta'.")

    for fila in costos:
        if not isinstance(fila, list) or len(fila) != len(demanda):
            raise DatosInvalidos("Todas las filas de 'costos' deben coincidir con el tamaño de 'demanda'.")

    _validar_numeros(oferta, "oferta")
    _validar_numeros(demanda, "demanda")
    for fila in costos:
        _validar_numeros(fila, "costos")

    if solo_balanceados and sum(oferta) != sum(demanda):
        raise DatosInvalidos(
            f"El problema no está balanceado (oferta={sum(oferta)}, demanda={sum(demanda)})."
        )
