import logging
import os
from time import time

from flask import Flask, request, jsonify
from flask_cors import CORS

from config import Config
from studytools.breadcrumbs import label_path
from studytools.errors import ToolError, UnsupportedBase
from studytools.linear import solve
from studytools.radix import convert, convert_to

log = logging.getLogger(__name__)


def create_app(config=Config):
    app = Flask(__name__)
    app.config.from_object(config)

    logging.basicConfig(level=app.config['LOG_LEVEL'], format="%(asctime)s  %(levelname)s  %(name)s  %(message)s")

    CORS(app, resources={r"/*": {"origins": app.config['CORS_ORIGINS'].split(',')}})

    # Simple per-IP rate limiter in production
    rate_store = {}
    app.extensions['rate_limit'] = rate_store

    @app.before_request
    def _rate_limit():
        if app.config['ENV'] != 'production':
            return None
        ip = request.remote_addr or 'unknown'
        now = int(time())
        window = 60
        limit = app.config['RATE_LIMIT_PER_MINUTE']
        # Forget clients whose last request has left the window
        for key in [k for k, ts in rate_store.items() if now - ts[-1] >= window]:
            del rate_store[key]
        bucket = [t for t in rate_store.get(ip, []) if now - t < window]
        if len(bucket) >= limit:
            log.warning("rate limited  ip=%s", ip)
            return jsonify({"error": "rate_limited", "retry_after": window}), 429
        bucket.append(now)
        rate_store[ip] = bucket

    @app.errorhandler(ToolError)
    def _tool_error(e):
        # Bad base is a client bug; everything else is a problem with what the student typed
        status = 400 if isinstance(e, UnsupportedBase) else 422
        log.info("%s: %s", e.code, e.message)
        return jsonify(e.to_dict()), status

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get('/api/breadcrumbs')
    def breadcrumbs():
        path = request.args.get('path', '/')
        crumbs = label_path(path)
        items = [dict(c.to_dict(), current=(i == len(crumbs) - 1)) for i, c in enumerate(crumbs)]
        return {"breadcrumbs": items}

    @app.post('/api/convert')
    def convert_number():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object required"}), 400
        text = data.get('text', '')
        base = data.get('base')
        if not isinstance(text, str):
            return jsonify({"error": "text must be a string"}), 400
        if base is None:
            return jsonify({"error": "base required"}), 400
        log.info("convert  text=%r base=%r", text, base)
        result = convert(text.strip(), base, limit=app.config['MAX_CONVERT_VALUE'])
        if not result.ok:
            log.info("%s: %s", result.code, result.error)
            return jsonify(result.to_dict()), 422
        return result.to_dict()

    @app.post('/api/convert/to')
    def convert_single():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object required"}), 400
        text = data.get('text', '')
        from_base = data.get('from')
        to_base = data.get('to')
        if not isinstance(text, str):
            return jsonify({"error": "text must be a string"}), 400
        if from_base is None or to_base is None:
            return jsonify({"error": "from and to required"}), 400
        prefixed = data.get('prefixed', True)
        if not isinstance(prefixed, bool):
            return jsonify({"error": "prefixed must be true or false"}), 400
        log.info("convert_to  text=%r from=%r to=%r", text, from_base, to_base)
        out = convert_to(text.strip(), from_base, to_base,
                         prefixed=prefixed,
                         limit=app.config['MAX_CONVERT_VALUE'])
        return {"result": out}

    @app.post('/api/solve')
    def solve_equation():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object required"}), 400
        equation = data.get('equation')
        if not isinstance(equation, str) or not equation.strip():
            return jsonify({"error": "equation required"}), 400
        log.info("solve  equation=%r", equation)
        return solve(equation).to_dict()

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', '5000')), debug=app.config['ENV'] != 'production')
