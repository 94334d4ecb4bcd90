"""Gateway Flask HTTP API Server.

Client-facing service: validates ``POST /`` bodies and forwards the
postal code to the resolver service.
"""

import logging
import sys
from pathlib import Path

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import GatewayApplicationService
from domain.exceptions import (
    ClientInputError,
    InvalidPostalCodeError,
    NotFoundError,
    UpstreamError,
)
from infrastructure.adapters import HttpTemperatureResolverClient
from infrastructure.api.common import (
    async_route,
    configure_logging,
    get_listen_address,
    health_payload,
)

SERVICE_NAME = "gateway"
DEFAULT_PORT = 8080

configure_logging()
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)
# Keys in declaration order, non-ASCII unescaped
app.json.sort_keys = False
app.json.ensure_ascii = False

# Initialize services
resolver_client = HttpTemperatureResolverClient()
gateway_service = GatewayApplicationService(resolver_client)


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify(health_payload(SERVICE_NAME))


@app.route("/", methods=["POST"])
@async_route
async def get_temperature() -> Response:
    """Resolve a postal code to its current temperature.

    Request body:
    {
        "cep": str (exactly 8 digits)
    }

    Responses:
        200: {"temp_c": float, "temp_f": float, "temp_k": float, "city": str}
        400: malformed body or missing cep
        422: cep is not 8 digits
        404: postal code or temperature not found
        500: resolver failure
    """
    try:
        # The body is read as JSON whatever the Content-Type header says
        payload = request.get_json(force=True, silent=True)
        result = await gateway_service.get_temperature(payload)
        return jsonify(result.to_dict())

    except InvalidPostalCodeError as e:
        _LOGGER.warning("Rejected postal code %r", e.code)
        return jsonify({"error": str(e)}), 422
    except ClientInputError as e:
        _LOGGER.warning("Invalid request: %s", e)
        return jsonify({"error": str(e)}), 400
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except UpstreamError as e:
        return jsonify({"error": f"error fetching temperature: {e}"}), 500
    except Exception as e:
        _LOGGER.exception("Error resolving temperature")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the gateway server."""
    host, port = get_listen_address(DEFAULT_PORT)

    _LOGGER.info("Starting CEP temperature gateway on %s:%d", host, port)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
