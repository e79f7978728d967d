from faker import Faker
from faker.providers import BaseProvider


class EstoqueProvider(BaseProvider):
    """
    Gerador de dados de demonstração
    Produtos industriais e CFOPs de entrada/saída mais comuns
    """

    product_names = [
        'Parafuso Sextavado', 'Porca Autotravante', 'Arruela Lisa', 'Chapa de Aço',
        'Tubo Galvanizado', 'Cabo Flexível', 'Rolamento Blindado', 'Correia Dentada',
        'Tinta Epóxi', 'Luva de Proteção', 'Disco de Corte', 'Eletrodo Revestido'
    ]

    product_specs = ['6mm', '8mm', '10mm', '12mm', '1/2"', '3/4"', '2,5mm²', '18L', 'G', 'M']

    cfop_entrada = ['1102', '1403', '2102', '2403', '1556']
    cfop_saida = ['5102', '5405', '6102', '6108', '5927']

    def produto(self):
        return f"{self.random_element(self.product_names)} {self.random_element(self.product_specs)}"

    def codigo_produto(self):
        return f"P-{self.random_int(1000, 9999)}"

    def cfop(self, tipo='entrada'):
        if tipo == 'entrada':
            return self.random_element(self.cfop_entrada)
        return self.random_element(self.cfop_saida)


fake = Faker('pt_BR')
fake.add_provider(EstoqueProvider)
