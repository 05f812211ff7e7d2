# transporte/logic/vogel.py

import logging
from collections import namedtuple

from transporte.utils.balanceador import balancear

logger = logging.getLogger(__name__)

# penal: diferencia entre los dos costos más bajos (-1 si no hay celdas)
# tipo: "fila" o "columna"; indice: la fila/columna evaluada
# destino: índice de la contraparte con el costo mínimo
Penalizacion = namedtuple("Penalizacion", ["penal", "tipo", "indice", "costo_min", "destino"])


class MetodoVogel:
    def __init__(self, costos, oferta, demanda):
        self.costos = [fila[:] for fila in costos]  # copia profunda
        self.oferta = oferta[:]
        self.demanda = demanda[:]
        self.filas = len(oferta)
        self.columnas = len(demanda)

        self.asignaciones = [
            [0 for _ in range(self.columnas)]
            for _ in range(self.filas)
        ]

        # índices con capacidad restante > 0, siempre en orden ascendente
        self.filas_activas = [i for i in range(self.filas) if self.oferta[i] > 0]
        self.columnas_activas = [j for j in range(self.columnas) if self.demanda[j] > 0]

        self.pasos = []  # lista de pasos explicados

    def _penalizar(self, tipo, indice, candidatos):
        # candidatos: [(costo, idx_contraparte), ...] en orden ascendente de idx
        if not candidatos:
            return Penalizacion(-1, tipo, indice, None, None)
        costo_min, destino = candidatos[0]
        for costo, idx in candidatos:
            if costo < costo_min:
                costo_min, destino = costo, idx
        ordenados = sorted(c for c, _ in candidatos)
        segundo = ordenados[1] if len(ordenados) >= 2 else ordenados[0]
        return Penalizacion(max(0, segundo - ordenados[0]), tipo, indice, costo_min, destino)

    def penalizacion_fila(self, i):
        if i not in self.filas_activas:
            return Penalizacion(-1, "fila", i, None, None)
        candidatos = [(self.costos[i][j], j) for j in self.columnas_activas]
        return self._penalizar("fila", i, candidatos)

    def penalizacion_columna(self, j):
        if j not in self.columnas_activas:
            return Penalizacion(-1, "columna", j, None, None)
        candidatos = [(self.costos[i][j], i) for i in self.filas_activas]
        return self._penalizar("columna", j, candidatos)

    def calcular_penalizaciones(self):
        """
        Penalizaciones de todas las filas y columnas en el estado actual.
        Filas/columnas agotadas reportan -1.
        """
        penal_filas = [self.penalizacion_fila(i) for i in range(self.filas)]
        penal_columnas = [self.penalizacion_columna(j) for j in range(self.columnas)]
        return penal_filas, penal_columnas

    def seleccionar(self, penal_filas=None, penal_columnas=None):
        """
        Devuelve (mejor, empatados) o (None, []) si no queda candidato.

        REGLA: gana la penalización más alta; a igual penalización, el menor
        costo mínimo. Si persiste el empate se conserva el primero evaluado
        (filas antes que columnas, luego índice ascendente).
        """
        if penal_filas is None or penal_columnas is None:
            penal_filas, penal_columnas = self.calcular_penalizaciones()
        # agotadas (-1) fuera; se conserva el orden filas, luego columnas
        evaluados = [p for p in penal_filas + penal_columnas if p.penal >= 0]

        mejor = None
        for cand in evaluados:
            if mejor is None or cand.penal > mejor.penal:
                mejor = cand
            elif cand.penal == mejor.penal and cand.costo_min < mejor.costo_min:
                mejor = cand

        if mejor is None:
            return None, []
        empatados = [c for c in evaluados if c.penal == mejor.penal]
        return mejor, empatados

    def mejor_celda(self, seleccion):
        """
        Devuelve la celda (fila, columna) que la penalización ya fijó como
        destino: la de menor costo, la primera encontrada a igual costo.
        """
        if seleccion.tipo == "fila":
            return seleccion.indice, seleccion.destino
        return seleccion.destino, seleccion.indice

    def asignar(self, fila, col):
        cantidad = min(self.oferta[fila], self.demanda[col])
        self.asignaciones[fila][col] = cantidad
        self.oferta[fila] -= cantidad
        self.demanda[col] -= cantidad

        # ambas pueden agotarse a la vez (caso degenerado)
        if self.oferta[fila] <= 0:
            self.filas_activas.remove(fila)
        if self.demanda[col] <= 0:
            self.columnas_activas.remove(col)
        return cantidad

    def resolver(self):
        """
        Ejecuta VAM hasta agotar filas o columnas activas.
        Registra cada paso con el estado ANTES y DESPUÉS de la asignación.
        """
        while self.filas_activas and self.columnas_activas:
            oferta_before = self.oferta[:]
            demanda_before = self.demanda[:]
            penal_filas, penal_columnas = self.calcular_penalizaciones()

            seleccion, empatados = self.seleccionar(penal_filas, penal_columnas)
            if seleccion is None:
                break

            fila, col = self.mejor_celda(seleccion)
            asignacion = self.asignar(fila, col)
            logger.debug("Paso %d: %s %d -> celda (%d,%d), %s unidades",
                         len(self.pasos) + 1, seleccion.tipo, seleccion.indice, fila, col, asignacion)

            tie_info = {
                "tie": len(empatados) > 1,
                "reason": "min_cost_then_order",
                "candidates": [(c.tipo, c.indice, c.costo_min) for c in empatados],
            }
            explicacion = (
                f"Penalización mayor = {seleccion.penal}. Se elige {seleccion.tipo} {seleccion.indice}, "
                f"celda de menor costo en esa {seleccion.tipo} -> ({fila},{col}). "
                f"Se asignan {asignacion} unidades. "
                f"Estado después: oferta={self.oferta[:]} demanda={self.demanda[:]}."
            )
            self.pasos.append({
                "paso_num": len(self.pasos) + 1,
                "tipo_penalizacion": seleccion.tipo,
                "posicion": seleccion.indice,
                "penalizaciones_filas": [{"fila": p.indice, "penal": p.penal} for p in penal_filas],
                "penalizaciones_columnas": [{"columna": p.indice, "penal": p.penal} for p in penal_columnas],
                "tie_info": tie_info,
                "celda_elegida": (fila, col),
                "costo_celda": self.costos[fila][col],
                "asignacion_realizada": asignacion,
                "oferta_restante": oferta_before,    # estado ANTES
                "demanda_restante": demanda_before,  # estado ANTES
                "oferta_posterior": self.oferta[:],
                "demanda_posterior": self.demanda[:],
                "explicacion": explicacion,
            })

        return {
            "asignaciones": self.asignaciones,
            "costo_total": calcular_costo_total(self.costos, self.asignaciones),
            "pasos": self.pasos,
        }


def calcular_costo_total(costos, asignaciones):
    total = 0
    for fila_costos, fila_asig in zip(costos, asignaciones):
        for costo, cantidad in zip(fila_costos, fila_asig):
            if cantidad > 0:
                total += cantidad * costo
    return total


def calcular_asignacion(oferta, demanda, costos):
    """
    Balancea (si hace falta) y resuelve con VAM.

    Devuelve dict con:
      - asignaciones: matriz en dimensiones balanceadas
      - costo_total: suma de cantidad * costo
      - fila_ficticia / columna_ficticia: si se agregó origen/destino ficticio
      - pasos: traza de cada iteración
      - meta_balance: info del balanceo
    """
    costos_b, oferta_b, demanda_b, meta = balancear(costos, oferta, demanda)
    resultado = MetodoVogel(costos_b, oferta_b, demanda_b).resolver()
    resultado["fila_ficticia"] = meta["tipo"] == "fila_ficticia"
    resultado["columna_ficticia"] = meta["tipo"] == "columna_ficticia"
    resultado["meta_balance"] = meta
    return resultado
