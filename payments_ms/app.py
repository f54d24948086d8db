# module payments_ms.app
from payments_ms.app_setup.factory import create_app

# App globale: construite à l'import, échoue si la configuration Stripe est incomplète
app = create_app()
