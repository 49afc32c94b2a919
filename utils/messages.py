"""
Centralized Spanish UI messages.
All user-facing text in Spanish for consistency.
"""

MESSAGES = {
    # Success messages
    'login_success': 'Bienvenido, {name}!',
    'logout_success': 'Sesión cerrada correctamente',
    'user_registered': 'Usuario registrado con éxito.',
    'reservation_created': 'Reserva realizada con éxito. Nos pondremos en contacto para confirmar.',
    'reservation_cancelled': 'Reserva cancelada con éxito.',
    'reservation_status_updated': 'Estado de la reserva actualizado con éxito.',
    'order_created': 'Pedido realizado con éxito.',
    'order_cancelled': 'Pedido cancelado con éxito.',
    'order_status_updated': 'Estado del pedido actualizado.',

    # Error messages
    'invalid_credentials': 'Credenciales incorrectas.',
    'admin_required': 'No tienes permisos de administrador.',
    'login_required': 'Debe iniciar sesión para acceder a este recurso.',
    'user_not_found': 'Usuario no encontrado.',
    'data_required': 'Datos requeridos',
    'not_found': 'Recurso no encontrado',
    'internal_error': 'Error interno del servidor.',
}
