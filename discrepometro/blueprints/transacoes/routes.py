from flask import render_template, request, flash, redirect, url_for, current_app
from sqlalchemy.exc import SQLAlchemyError

from . import transacoes_bp
from .forms import TransacaoForm, TransacaoFilterForm
from discrepometro.exceptions import DiscrepometroException
from discrepometro.services.record_service import transacao_service
from discrepometro.utils.forms import form_data, empresa_choices


@transacoes_bp.route('/')
def index():
    """Lista de transações, com filtro opcional por tipo"""
    filter_form = TransacaoFilterForm(request.args, meta={'csrf': False})
    page = request.args.get('page', 1, type=int)
    try:
        pagination = transacao_service.paginate(
            page=page,
            per_page=current_app.config['ITEMS_PER_PAGE'],
            tipo=filter_form.tipo.data
        )
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao carregar transações')
        return render_template('transacoes/index.html', transacoes=[], pagination=None,
                               filter_form=filter_form, load_error=True)

    return render_template('transacoes/index.html', transacoes=pagination.items,
                           pagination=pagination, filter_form=filter_form)


@transacoes_bp.route('/novo', methods=['GET', 'POST'])
def create():
    form = TransacaoForm()
    form.empresa_id.choices = empresa_choices()

    if form.validate_on_submit():
        try:
            transacao = transacao_service.create(form_data(form, TransacaoForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception('Erro ao criar transação')
            flash('Não foi possível salvar os dados da transação', 'danger')
        else:
            flash('Nova transação registrada com sucesso', 'success')
            return redirect(url_for('transacoes.detail', transacao_id=transacao.id))

    return render_template('transacoes/form.html', form=form, transacao=None)


@transacoes_bp.route('/<transacao_id>')
def detail(transacao_id):
    try:
        transacao = transacao_service.get(transacao_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar transação {transacao_id}')
        flash('Não foi possível carregar os dados da transação', 'danger')
        return redirect(url_for('transacoes.index'))

    return render_template('transacoes/detail.html', transacao=transacao)


@transacoes_bp.route('/<transacao_id>/editar', methods=['GET', 'POST'])
def edit(transacao_id):
    try:
        transacao = transacao_service.get(transacao_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar transação {transacao_id}')
        flash('Não foi possível carregar os dados da transação', 'danger')
        return redirect(url_for('transacoes.index'))

    form = TransacaoForm(obj=transacao)
    form.empresa_id.choices = empresa_choices()

    if form.validate_on_submit():
        try:
            transacao_service.update(transacao_id, form_data(form, TransacaoForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception(f'Erro ao atualizar transação {transacao_id}')
            flash('Não foi possível salvar os dados da transação', 'danger')
        else:
            flash('Dados da transação atualizados com sucesso', 'success')
            return redirect(url_for('transacoes.detail', transacao_id=transacao_id))

    return render_template('transacoes/form.html', form=form, transacao=transacao)


@transacoes_bp.route('/<transacao_id>/excluir', methods=['POST'])
def delete(transacao_id):
    try:
        transacao_service.delete(transacao_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao excluir transação {transacao_id}')
        flash('Não foi possível excluir a transação', 'danger')
    else:
        flash('A transação foi excluída com sucesso', 'success')
    return redirect(url_for('transacoes.index'))
