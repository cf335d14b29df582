# app.py
from functools import wraps

from flask import Flask, jsonify, make_response, request
from flask_caching import Cache
from werkzeug.exceptions import HTTPException

from pos_service import config
from pos_service.adapters.json_file_adapter import JsonFileStoreAdapter
from pos_service.database_setup import setup_store
from pos_service.domain.errors import DomainError
from pos_service.logger import get_logger, setup_logging
from pos_service.services.product_service import ProductService
from pos_service.services.report_service import ReportService
from pos_service.services.sales_service import SalesService

logger = get_logger("http")

cache = Cache()


def cache_config():
    return {
        "CACHE_TYPE": config.CACHE_TYPE,
        "CACHE_REDIS_HOST": config.CACHE_HOST,
        "CACHE_REDIS_PORT": config.CACHE_PORT,
        "CACHE_REDIS_DB": config.CACHE_DB,
        "CACHE_DEFAULT_TIMEOUT": config.CACHE_TIMEOUT,
    }


def cache_control_header(timeout=None):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            # La clave es la URL completa de la petición
            cache_key = request.full_path

            cached_response = cache.get(cache_key)
            if cached_response is not None:
                response = make_response(cached_response)
                response.headers['X-Cache'] = 'HIT'
                response.headers['Content-Type'] = 'application/json'
                return response

            response = make_response(f(*args, **kwargs))
            response.headers['X-Cache'] = 'MISS'
            if response.status_code == 200:
                cache.set(cache_key, response.data, timeout=timeout)
            return response

        return decorated_function

    return decorator


def request_body():
    """Cuerpo JSON de la petición; cualquier otra cosa se trata como {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(repository=None, test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(cache_config())
    if test_config:
        app.config.from_mapping(test_config)

    setup_logging(app.config.get("LOG_LEVEL", config.LOG_LEVEL))
    cache.init_app(app)

    # Dependencia: inyección del repositorio en los servicios
    if repository is None:
        repository = JsonFileStoreAdapter(app.config.get("DB_FILE", config.DB_FILE))
    setup_store(repository, app.config.get("SEED_FILE", config.SEED_FILE))

    product_service = ProductService(repository=repository)
    sales_service = SalesService(repository=repository)
    report_service = ReportService(repository=repository)
    timeout = app.config["CACHE_DEFAULT_TIMEOUT"]

    @app.after_request
    def add_cors_headers(response):
        response.headers['Access-Control-Allow-Origin'] = '*'
        response.headers['Access-Control-Allow-Methods'] = 'GET,POST,PUT,DELETE,OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type,Authorization'
        return response

    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": str(error)}), 500

    # ---------- Productos ----------

    @app.route('/api/products', methods=['GET'])
    @cache_control_header(timeout=timeout)
    def list_products():
        return jsonify([p.to_dict() for p in product_service.list_products()])

    @app.route('/api/products', methods=['POST'])
    def create_product():
        product = product_service.create_product(request_body())
        cache.clear()
        return jsonify(product.to_dict()), 201

    @app.route('/api/products/<int:product_id>', methods=['PUT'])
    def update_product(product_id):
        product = product_service.update_product(product_id, request_body())
        cache.clear()
        return jsonify(product.to_dict())

    @app.route('/api/products/<int:product_id>', methods=['DELETE'])
    def delete_product(product_id):
        product_service.delete_product(product_id)
        cache.clear()
        return '', 204

    # ---------- Ventas ----------

    @app.route('/api/sales', methods=['GET'])
    @cache_control_header(timeout=timeout)
    def list_sales():
        return jsonify([s.to_dict() for s in sales_service.list_sales()])

    @app.route('/api/sales', methods=['POST'])
    def record_sale():
        sale = sales_service.record_sale(request_body().get("items"))
        cache.clear()
        return jsonify(sale.to_dict())

    # ---------- Reportes ----------

    @app.route('/api/reports/summary', methods=['GET'])
    @cache_control_header(timeout=timeout)
    def reports_summary():
        return jsonify(report_service.summary().to_dict())

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({'status': 'ok'})

    return app


def main():
    app = create_app()
    app.run(host=config.HOST, port=config.PORT, debug=False)


if __name__ == '__main__':
    main()
