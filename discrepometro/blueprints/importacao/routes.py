from flask import render_template, request, flash, redirect, url_for, current_app, Response, abort

from . import importacao_bp
from .forms import ImportForm
from discrepometro.exceptions import ImportFailed
from discrepometro.services.import_service import ImportService

# Para onde voltar depois de importar
LIST_ENDPOINTS = {
    'empresas': 'empresas.index',
    'transacoes': 'transacoes.index',
    'estoque': 'estoque.index',
    'analise': 'analise.index',
}


def expected_headers():
    """Colunas esperadas por entidade (nomes em português)"""
    return {
        key: sorted({field for field in template['aliases'].values()})
        for key, template in ImportService.TEMPLATES.items()
    }


@importacao_bp.route('/', methods=['GET', 'POST'])
def index():
    """Importação de CSV para qualquer cadastro"""
    form = ImportForm()
    if request.method == 'GET' and request.args.get('entidade') in ImportService.TEMPLATES:
        form.entidade.data = request.args['entidade']

    if form.validate_on_submit():
        entidade = form.entidade.data
        arquivo = form.arquivo.data
        try:
            count = ImportService.import_csv(entidade, arquivo)
        except ImportFailed:
            current_app.logger.exception(f'Erro na importação de {entidade}')
            flash('Ocorreu um erro ao importar o arquivo', 'danger')
            return redirect(url_for('importacao.index', entidade=entidade))

        flash(f'Arquivo {arquivo.filename} importado com sucesso: {count} registro(s)', 'success')
        return redirect(url_for(LIST_ENDPOINTS[entidade]))

    return render_template('importacao/index.html', form=form, headers=expected_headers(),
                           templates=ImportService.TEMPLATES)


@importacao_bp.route('/modelo/<entidade>')
def download_template(entidade):
    """Baixa o CSV modelo da entidade"""
    content = ImportService.template_csv(entidade)
    if content is None:
        abort(404)
    return Response(
        content,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename=modelo_{entidade}.csv'}
    )
