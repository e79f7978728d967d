from flask import render_template, request, flash, redirect, url_for, current_app
from sqlalchemy.exc import SQLAlchemyError

from . import estoque_bp
from .forms import EstoqueForm
from discrepometro.exceptions import DiscrepometroException
from discrepometro.services.record_service import estoque_service
from discrepometro.utils.forms import form_data, empresa_choices


@estoque_bp.route('/')
def index():
    """Posições de estoque"""
    page = request.args.get('page', 1, type=int)
    try:
        pagination = estoque_service.paginate(page=page, per_page=current_app.config['ITEMS_PER_PAGE'])
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao carregar estoque')
        return render_template('estoque/index.html', estoques=[], pagination=None, load_error=True)

    return render_template('estoque/index.html', estoques=pagination.items, pagination=pagination)


@estoque_bp.route('/novo', methods=['GET', 'POST'])
def create():
    form = EstoqueForm()
    form.empresa_id.choices = empresa_choices()

    if form.validate_on_submit():
        try:
            estoque = estoque_service.create(form_data(form, EstoqueForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception('Erro ao criar registro de estoque')
            flash('Não foi possível salvar os dados do estoque', 'danger')
        else:
            flash('Novo registro de estoque cadastrado com sucesso', 'success')
            return redirect(url_for('estoque.detail', estoque_id=estoque.id))

    return render_template('estoque/form.html', form=form, estoque=None)


@estoque_bp.route('/<estoque_id>')
def detail(estoque_id):
    try:
        estoque = estoque_service.get(estoque_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar estoque {estoque_id}')
        flash('Não foi possível carregar os dados do estoque', 'danger')
        return redirect(url_for('estoque.index'))

    return render_template('estoque/detail.html', estoque=estoque)


@estoque_bp.route('/<estoque_id>/editar', methods=['GET', 'POST'])
def edit(estoque_id):
    try:
        estoque = estoque_service.get(estoque_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar estoque {estoque_id}')
        flash('Não foi possível carregar os dados do estoque', 'danger')
        return redirect(url_for('estoque.index'))

    form = EstoqueForm(obj=estoque)
    form.empresa_id.choices = empresa_choices()

    if form.validate_on_submit():
        try:
            estoque_service.update(estoque_id, form_data(form, EstoqueForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception(f'Erro ao atualizar estoque {estoque_id}')
            flash('Não foi possível salvar os dados do estoque', 'danger')
        else:
            flash('Registro de estoque atualizado com sucesso', 'success')
            return redirect(url_for('estoque.detail', estoque_id=estoque_id))

    return render_template('estoque/form.html', form=form, estoque=estoque)


@estoque_bp.route('/<estoque_id>/excluir', methods=['POST'])
def delete(estoque_id):
    try:
        estoque_service.delete(estoque_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao excluir estoque {estoque_id}')
        flash('Não foi possível excluir o registro', 'danger')
    else:
        flash('O registro de estoque foi excluído com sucesso', 'success')
    return redirect(url_for('estoque.index'))
