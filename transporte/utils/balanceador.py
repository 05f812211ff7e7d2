# transporte/utils/balanceador.py

def balancear(costos, oferta, demanda):
    """
    Iguala oferta y demanda totales con un origen o destino ficticio de costo 0.

    El ficticio siempre se agrega al final, así los índices originales se
    conservan. Como mucho se agrega uno (las dos condiciones se excluyen).

    Devuelve: (costos_b, oferta_b, demanda_b, meta)
    meta: {"tipo": "balanceado" | "fila_ficticia" | "columna_ficticia",
           "diferencia": unidades del ficticio (0 si balanceado)}
    """
    # copias: las entradas del llamador no se tocan
    costos = [list(fila) for fila in costos]
    oferta = list(oferta)
    demanda = list(demanda)

    diferencia = sum(oferta) - sum(demanda)

    if diferencia < 0:
        oferta.append(-diferencia)
        costos.append([0] * len(demanda))
        return costos, oferta, demanda, {"tipo": "fila_ficticia", "diferencia": -diferencia}

    if diferencia > 0:
        demanda.append(diferencia)
        for fila in costos:
            fila.append(0)
        return costos, oferta, demanda, {"tipo": "columna_ficticia", "diferencia": diferencia}

    return costos, oferta, demanda, {"tipo": "balanceado", "diferencia": 0}
