from flask import Blueprint, current_app

main = Blueprint('main', __name__)


@main.route('/health')
def health():
    return 'OK', 200


@main.route('/')
def viewer():
    return current_app.send_static_file('index.html')


@main.route('/admin')
def admin():
    return current_app.send_static_file('admin.html')
