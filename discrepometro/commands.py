import click
import random
from datetime import date
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError
from discrepometro.extensions import db
from discrepometro.models import Empresa, Transacao, Estoque, AnaliseDiscrepancia
from discrepometro.utils.fake_gen import fake


@click.command('status')
@with_appcontext
def status():
    """Mostra a contagem de registros por tabela."""
    click.echo(click.style('📊 Situação do banco do Discrepômetro:', fg='cyan', bold=True))

    try:
        counts = [
            ('Empresas', Empresa.query.count()),
            ('Transações', Transacao.query.count()),
            ('Estoque', Estoque.query.count()),
            ('Análises', AnaliseDiscrepancia.query.count()),
        ]
        for label, count in counts:
            click.echo(f" - {label}: \t{count}")

        if any(count for _, count in counts):
            click.echo(click.style('✔ Conexão ok, há dados cadastrados.', fg='green'))
        else:
            click.echo(click.style('⚠ Banco vazio, rode flask seed para gerar dados de demonstração.', fg='yellow'))

    except SQLAlchemyError as e:
        click.echo(click.style(f'✘ Falha ao ler o banco: {str(e)}', fg='red'))
        click.echo("Verifique se 'flask db upgrade' foi executado")


@click.command('seed')
@click.option('--scale', default=1, help='Multiplicador do volume de dados (padrão 1)')
@with_appcontext
def seed(scale):
    """
    Recria as tabelas e preenche com dados de demonstração.
    Atenção: apaga os dados existentes!
    """
    click.echo(click.style(f'⚡ Gerando dados de demonstração (escala {scale}x)...', fg='cyan', bold=True))

    db.drop_all()
    db.create_all()

    empresas = init_empresas(scale)
    init_movimentos(empresas, scale)
    init_analises(empresas, scale)

    click.echo(click.style('✔ Dados gerados!', fg='green', bold=True))


def init_empresas(scale=1):
    """Empresas"""
    empresas = []
    for _ in range(5 * scale):
        e = Empresa(nome=fake.company(), cnpj=fake.cnpj())
        db.session.add(e)
        empresas.append(e)
    db.session.commit()
    click.echo(f'  ✓ {len(empresas)} empresas')
    return empresas


def init_movimentos(empresas, scale=1):
    """Transações de 2021 e posições de estoque em 31/12/2021"""
    count = 0
    for empresa in empresas:
        for _ in range(10 * scale):
            produto = fake.produto()
            tipo = random.choice(Transacao.TIPOS)
            db.session.add(Transacao(
                empresa=empresa,
                produto=produto,
                codigo_produto=fake.codigo_produto(),
                quantidade=random.randint(1, 500),
                valor=round(random.uniform(10, 5000), 2),
                data=fake.date_between(start_date=date(2021, 1, 1), end_date=date(2021, 12, 31)),
                tipo=tipo,
                cfop=fake.cfop(tipo),
            ))
            db.session.add(Estoque(
                empresa=empresa,
                produto=produto,
                quantidade_final=random.randint(0, 1000),
                data_base=date(2021, 12, 31),
            ))
            count += 1
    db.session.commit()
    click.echo(f'  ✓ {count} transações e posições de estoque')


def init_analises(empresas, scale=1):
    """Análises: parte com estoque final coerente, parte com discrepância"""
    count = 0
    for empresa in empresas:
        for _ in range(8 * scale):
            inicial = random.randint(0, 500)
            entradas = random.randint(0, 800)
            saidas = random.randint(0, inicial + entradas)
            final = inicial + entradas - saidas
            tipo = AnaliseDiscrepancia.TIPO_SEM_DISCREPANCIA
            if random.random() < 0.4:
                diferenca = random.randint(1, 50)
                if random.random() < 0.5:
                    final += diferenca
                    tipo = AnaliseDiscrepancia.TIPO_COMPRA_SEM_NOTA
                else:
                    final -= diferenca
                    tipo = AnaliseDiscrepancia.TIPO_VENDA_SEM_NOTA
            db.session.add(AnaliseDiscrepancia(
                empresa=empresa,
                produto=fake.produto(),
                codigo_produto=fake.codigo_produto(),
                estoque_inicial_2021=inicial,
                estoque_final_2021=final,
                total_entradas=entradas,
                total_saidas=saidas,
                tipo_discrepancia=tipo,
                fonte=random.choice(AnaliseDiscrepancia.FONTES),
            ))
            count += 1
    db.session.commit()
    click.echo(f'  ✓ {count} análises de discrepância')
