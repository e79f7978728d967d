import os
from discrepometro import create_app
from discrepometro.extensions import db
from discrepometro.models import Empresa, Transacao, Estoque, AnaliseDiscrepancia

# Modo de configuração via variável de ambiente
# Aceita FLASK_ENV (hospedagem) ou FLASK_CONFIG
config_name = os.getenv('FLASK_ENV') or os.getenv('FLASK_CONFIG') or 'default'
if config_name in ('development', 'dev'):
    config_name = 'development'
elif config_name not in ('production', 'testing'):
    config_name = 'default'

app = create_app(config_name)


@app.shell_context_processor
def make_shell_context():
    """
    Contexto do 'flask shell'.
    Já importa db e os modelos.
    """
    return dict(
        db=db,
        app=app,
        Empresa=Empresa,
        Transacao=Transacao,
        Estoque=Estoque,
        AnaliseDiscrepancia=AnaliseDiscrepancia,
    )


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    print("-------------------------------------------------------")
    print(f"   Discrepômetro em http://localhost:{port}")
    print("-------------------------------------------------------")
    app.run(host='0.0.0.0', port=port)
