from datetime import datetime
from flask import render_template, request, flash, redirect, url_for, current_app, send_file
from sqlalchemy.exc import SQLAlchemyError

from . import analise_bp
from .forms import AnaliseDiscrepanciaForm, AnaliseFilterForm
from discrepometro.exceptions import DiscrepometroException
from discrepometro.models import AnaliseDiscrepancia
from discrepometro.services.record_service import analise_service
from discrepometro.services.export_service import export_service, ANALISE_COLUMNS
from discrepometro.utils.forms import form_data, empresa_choices


def _filters(filter_form):
    return {
        'tipo_discrepancia': filter_form.tipo.data,
        'fonte': filter_form.fonte.data,
    }


@analise_bp.route('/')
def index():
    """
    Lista de análises de discrepância
    Estoque final calculado = estoque inicial 2021 + total entradas - total saídas
    """
    filter_form = AnaliseFilterForm(request.args, meta={'csrf': False})
    page = request.args.get('page', 1, type=int)
    try:
        pagination = analise_service.paginate(
            page=page,
            per_page=current_app.config['ITEMS_PER_PAGE'],
            **_filters(filter_form)
        )
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao carregar análises')
        return render_template('analise/index.html', analises=[], pagination=None,
                               filter_form=filter_form, load_error=True)

    return render_template('analise/index.html', analises=pagination.items,
                           pagination=pagination, filter_form=filter_form)


@analise_bp.route('/exportar/<fmt>')
def export(fmt):
    """Exporta as análises (respeitando os filtros) em CSV ou Excel"""
    if fmt not in ('csv', 'xlsx'):
        flash(f'Formato de exportação não suportado: {fmt}', 'warning')
        return redirect(url_for('analise.index'))

    filter_form = AnaliseFilterForm(request.args, meta={'csrf': False})
    filename_base = f'analise_discrepancia_{datetime.now().strftime("%Y%m%d_%H%M%S")}'

    try:
        query = analise_service.filter(**_filters(filter_form))
        rows = export_service.analise_rows(query.order_by(AnaliseDiscrepancia.produto.asc()).all())

        if fmt == 'csv':
            output = export_service.export_to_csv(rows, ANALISE_COLUMNS)
            return send_file(output, mimetype='text/csv', as_attachment=True,
                             download_name=f'{filename_base}.csv')

        output = export_service.export_to_excel(
            data=rows, columns=ANALISE_COLUMNS,
            sheet_name='Análises',
            title='Discrepômetro - Análise de Discrepâncias'
        )
        return send_file(output,
                         mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
                         as_attachment=True, download_name=f'{filename_base}.xlsx')
    except SQLAlchemyError:
        current_app.logger.exception('Erro ao exportar análises')
        flash('Não foi possível exportar os dados', 'danger')
        return redirect(url_for('analise.index'))


@analise_bp.route('/novo', methods=['GET', 'POST'])
def create():
    form = AnaliseDiscrepanciaForm()
    form.empresa_id.choices = empresa_choices()

    if form.validate_on_submit():
        try:
            analise = analise_service.create(form_data(form, AnaliseDiscrepanciaForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception('Erro ao criar análise')
            flash('Não foi possível salvar os dados da análise', 'danger')
        else:
            flash('Nova análise cadastrada com sucesso', 'success')
            return redirect(url_for('analise.detail', analise_id=analise.id))

    return render_template('analise/form.html', form=form, analise=None)


@analise_bp.route('/<analise_id>')
def detail(analise_id):
    try:
        analise = analise_service.get(analise_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar análise {analise_id}')
        flash('Não foi possível carregar os dados da análise', 'danger')
        return redirect(url_for('analise.index'))

    return render_template('analise/detail.html', analise=analise)


@analise_bp.route('/<analise_id>/editar', methods=['GET', 'POST'])
def edit(analise_id):
    try:
        analise = analise_service.get(analise_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao carregar análise {analise_id}')
        flash('Não foi possível carregar os dados da análise', 'danger')
        return redirect(url_for('analise.index'))

    form = AnaliseDiscrepanciaForm(obj=analise)
    form.empresa_id.choices = empresa_choices()

    if form.validate_on_submit():
        try:
            analise_service.update(analise_id, form_data(form, AnaliseDiscrepanciaForm.FIELDS))
        except (DiscrepometroException, SQLAlchemyError):
            current_app.logger.exception(f'Erro ao atualizar análise {analise_id}')
            flash('Não foi possível salvar os dados da análise', 'danger')
        else:
            flash('Dados da análise atualizados com sucesso', 'success')
            return redirect(url_for('analise.detail', analise_id=analise_id))

    return render_template('analise/form.html', form=form, analise=analise)


@analise_bp.route('/<analise_id>/excluir', methods=['POST'])
def delete(analise_id):
    try:
        analise_service.delete(analise_id)
    except (DiscrepometroException, SQLAlchemyError):
        current_app.logger.exception(f'Erro ao excluir análise {analise_id}')
        flash('Não foi possível excluir o registro', 'danger')
    else:
        flash('A análise de discrepância foi excluída com sucesso', 'success')
    return redirect(url_for('analise.index'))
