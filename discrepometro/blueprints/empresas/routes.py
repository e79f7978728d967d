from flask import render_template, request, flash, redirect, url_for, current_app
from sqlalchemy.exc import SQLAlchemyError

from . import empresas_bp
from .forms import EmpresaForm
from discrepometro.exceptions import DiscrepometroException
from discrepometro.services.record_service import empresa_service
from discrepometro.utils.forms import form_data


@empresas_bp.route('/')
def index():
    """Lista de empresas"""
    page = request.args.get('page', 1, type=int)
    try:
        pagination = empresa_service.paginate(page=page, per_page=current_app.config['ITEMS_PER_PAGE'])
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao carregar empresas')
        return render_template('empresas/index.html', empresas=[], pagination=None, load_error=True)

    return render_template('empresas/index.html', empresas=pagination.items, pagination=pagination)


@empresas_bp.route('/novo', methods=['GET', 'POST'])
def create():
    form = EmpresaForm()
    if form.validate_on_submit():
        try:
            empresa = empresa_service.create(form_data(form, EmpresaForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception('Erro ao criar empresa')
            flash('Não foi possível salvar os dados da empresa', 'danger')
        else:
            flash('Nova empresa cadastrada com sucesso', 'success')
            return redirect(url_for('empresas.detail', empresa_id=empresa.id))

    return render_template('empresas/form.html', form=form, empresa=None)


@empresas_bp.route('/<empresa_id>')
def detail(empresa_id):
    """Detalhes da empresa com seus registros vinculados"""
    try:
        empresa = empresa_service.get(empresa_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar empresa {empresa_id}')
        flash('Não foi possível carregar os dados da empresa', 'danger')
        return redirect(url_for('empresas.index'))

    return render_template(
        'empresas/detail.html',
        empresa=empresa,
        transacoes=empresa.transacoes.limit(20).all(),
        estoques=empresa.estoques.limit(20).all(),
        analises=empresa.analises.limit(20).all()
    )


@empresas_bp.route('/<empresa_id>/editar', methods=['GET', 'POST'])
def edit(empresa_id):
    try:
        empresa = empresa_service.get(empresa_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar empresa {empresa_id}')
        flash('Não foi possível carregar os dados da empresa', 'danger')
        return redirect(url_for('empresas.index'))

    form = EmpresaForm(obj=empresa)
    if form.validate_on_submit():
        try:
            empresa_service.update(empresa_id, form_data(form, EmpresaForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception(f'Erro ao atualizar empresa {empresa_id}')
            flash('Não foi possível salvar os dados da empresa', 'danger')
        else:
            flash('Dados da empresa atualizados com sucesso', 'success')
            return redirect(url_for('empresas.detail', empresa_id=empresa_id))

    return render_template('empresas/form.html', form=form, empresa=empresa)


@empresas_bp.route('/<empresa_id>/excluir', methods=['POST'])
def delete(empresa_id):
    try:
        empresa_service.delete(empresa_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao excluir empresa {empresa_id}')
        flash('Não foi possível excluir a empresa', 'danger')
    else:
        flash('A empresa foi excluída com sucesso', 'success')
    return redirect(url_for('empresas.index'))
