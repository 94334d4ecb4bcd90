"""Resolver Flask HTTP API Server.

Internal service: resolves ``GET /?cep=<code>`` through ViaCEP and
WeatherAPI and answers with the temperature in three units.
"""

import logging
import sys
from pathlib import Path

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import ResolverApplicationService
from domain.exceptions import InvalidPostalCodeError, NotFoundError, UpstreamError
from infrastructure.adapters import ViaCepPostalDirectory, WeatherApiProvider
from infrastructure.api.common import (
    async_route,
    configure_logging,
    get_listen_address,
    health_payload,
)

SERVICE_NAME = "resolver"
DEFAULT_PORT = 8081

configure_logging()
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)
# Keys in declaration order, non-ASCII unescaped
app.json.sort_keys = False
app.json.ensure_ascii = False

# Initialize services
postal_directory = ViaCepPostalDirectory()
weather_provider = WeatherApiProvider()
resolver_service = ResolverApplicationService(postal_directory, weather_provider)


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify(health_payload(SERVICE_NAME))


@app.route("/", methods=["GET"])
@async_route
async def get_temperature() -> Response:
    """Resolve a postal code to its current temperature.

    Query parameters:
        cep: str (exactly 8 digits)

    Responses:
        200: {"temp_c": float, "temp_f": float, "temp_k": float, "city": str}
        422: cep missing or not 8 digits
        404: postal code or temperature not found
        500: ViaCEP or WeatherAPI failure
    """
    try:
        result = await resolver_service.get_temperature(request.args.get("cep"))
        return jsonify(result.to_dict())

    except InvalidPostalCodeError as e:
        _LOGGER.warning("Rejected postal code %r", e.code)
        return jsonify({"error": str(e)}), 422
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except UpstreamError as e:
        return jsonify({"error": str(e)}), 500
    except Exception as e:
        _LOGGER.exception("Error resolving temperature")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the resolver server."""
    host, port = get_listen_address(DEFAULT_PORT)

    _LOGGER.info("Starting CEP temperature resolver on %s:%d", host, port)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
