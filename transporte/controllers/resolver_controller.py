# transporte/controllers/resolver_controller.py

from flask import Blueprint, current_app, request, jsonify
from transporte.logic.vogel import calcular_asignacion
from transporte.utils.validacion import DatosInvalidos, validar_problema
import uuid
import traceback

resolver_bp = Blueprint("resolver", __name__)


def _error_response(message, status=400, detalle=None):
    error_id = str(uuid.uuid4())[:8]
    payload = {"error": message, "code": error_id}
    if detalle is not None:
        # el detalle extenso solo va al log, junto al código
        current_app.logger.error(f"Error {error_id}: {detalle}")
    return jsonify(payload), status


@resolver_bp.route("/salud", methods=["GET"])
def salud():
    return jsonify({"status": "ok"})


@resolver_bp.route("/resolver/vogel", methods=["POST"])
def resolver_vogel():
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return _error_response("No se recibió ningún dato.", 400)

        costos = data.get("costos")
        oferta = data.get("oferta")
        demanda = data.get("demanda")

        validar_problema(
            costos=costos, oferta=oferta, demanda=demanda,
            max_dimension=current_app.config["MAX_DIMENSION"],
            solo_balanceados=current_app.config["SOLO_BALANCEADOS"],
        )

        resultado = calcular_asignacion(oferta=oferta, demanda=demanda, costos=costos)

        return jsonify({
            "status": "ok",
            "asignaciones": resultado["asignaciones"],
            "costo_total": resultado["costo_total"],
            "fila_ficticia": resultado["fila_ficticia"],
            "columna_ficticia": resultado["columna_ficticia"],
            "pasos": resultado["pasos"],
            "meta_balance": resultado["meta_balance"],
        })
    except DatosInvalidos as exc:
        return _error_response(str(exc), 400)
    except Exception:
        tb = traceback.format_exc()
        return _error_response("Error interno al resolver Vogel", 500, detalle=tb)
