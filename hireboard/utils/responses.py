from flask import jsonify


def error(message, status=400):
    return jsonify({"error": message}), status


def form_errors(form):
    return jsonify({"errors": form.errors}), 400
