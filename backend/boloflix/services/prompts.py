"""Prompt templates for the BoloFlix marketing generators."""

TASTE_PROFILE = """Baseado nestas preferências para bolos:
- Vibe: {vibe}
- Momento de consumo: {moment}
- Preferência por frutas: {fruits}

Crie um "Perfil de Sabor BoloFlix" divertido e acolhedor para este usuário em um único parágrafo.
Depois, sugira um bolo caseiro delicioso que se encaixe perfeitamente neste perfil.

Responda EXCLUSIVAMENTE com um objeto JSON com as chaves "profileDescription" e "cakeSuggestion".
"""

DELIVERY_AVAILABILITY = """Aja como o sistema de logística da BoloFlix. Um cliente quer agendar uma entrega \
para {day} no período da {time}.

Responda EXCLUSIVAMENTE com um objeto JSON com as chaves "available" (booleano) e "message" \
(string com a resposta para o cliente).

- Na maioria das vezes (cerca de 80%), a entrega está disponível e a mensagem é positiva.
- Ocasionalmente (cerca de 20%), a entrega está lotada; a mensagem é amigável e sugere outro horário.
- Varie as mensagens para parecer natural.
"""

WELCOME_MESSAGE = """Aja como a voz da marca BoloFlix. Um novo cliente chamado(a) "{customer_name}" \
acabou de assinar o plano "{plan_title}". As entregas serão toda "{delivery_day}".

Escreva uma mensagem de boas-vindas curta (2-3 frases), calorosa e comemorativa, com tom nostálgico, \
como se estivesse recebendo um novo membro na família. Mencione o nome, o plano e o dia da entrega.

Responda EXCLUSIVAMENTE com um objeto JSON com uma única chave "message".
"""

WELCOME_FALLBACK = (
    "Bem-vindo(a) à família BoloFlix, {customer_name}! Sua assinatura do plano "
    '"{plan_title}" foi criada com sucesso e o primeiro bolo chega na {delivery_day}.'
)

INVESTOR_PITCH = """Crie um pitch conciso (3-4 parágrafos) e persuasivo para investidores da BoloFlix, \
um serviço de assinatura de bolos caseiros com temas mensais surpresa. A marca é nostálgica, acolhedora \
e familiar, a "Netflix de bolos". Fale do problema (conveniência, qualidade), da solução (assinatura com \
curadoria), do mercado e do modelo de negócio com os planos de assinatura. Use markdown simples."""

BUSINESS_MODEL_CANVAS = """Gere o conteúdo de um Business Model Canvas para a BoloFlix, um serviço de \
assinatura de bolos caseiros para famílias e pessoas que apreciam comida nostálgica, com caixas temáticas \
mensais e monetização por planos de assinatura.

Responda EXCLUSIVAMENTE com um objeto JSON com as chaves keyPartners, keyActivities, keyResources, \
valuePropositions, customerRelationships, channels, customerSegments, costStructure e revenueStreams. \
Cada chave deve conter um array de 2 a 4 strings."""

FINANCIAL_ESTIMATE = """Gere uma estimativa financeira simplificada para o primeiro ano da BoloFlix, \
um serviço de assinatura de bolos. Considere três planos: "Bolo Curioso" (R$60/mês, 50 assinantes), \
"Bolo Apaixonado" (R$120/mês, 30 assinantes) e "Família BoloFlix" (R$200/mês, 20 assinantes). \
Estime os custos mensais com ingredientes, embalagens, entrega, marketing e um pequeno salário. \
Calcule receita mensal, custos totais e lucro líquido mensal e anual. Use markdown simples com títulos e listas."""

TESTIMONIALS = """Gere 3 depoimentos de clientes felizes da BoloFlix, um serviço de assinatura de bolos caseiros.
O tom deve ser caloroso, pessoal e nostálgico, reforçando família e aconchego.

Responda EXCLUSIVAMENTE com um array JSON de 3 objetos, cada um com as chaves "quote", "author" e "favoriteCake".
"""

CUSTOM_CAKE = """Um cliente da BoloFlix montou um bolo personalizado:
- Massa: {base}
- Recheio: {filling}
- Cobertura: {topping}

Aja como um mestre confeiteiro criativo e nostálgico. Crie um nome divertido e único e um parágrafo \
de descrição acolhedor e apetitoso para este bolo.

Responda EXCLUSIVAMENTE com um objeto JSON com as chaves "cakeName" e "description".
"""

CAKE_OF_THE_MONTH = """Crie os detalhes do "Bolo do Mês" da BoloFlix com o tema "Sabores da Infância": \
um bolo de fubá com goiabada. Gere um nome criativo e fofo, uma descrição nostálgica de 2-3 frases \
e 3 notas de sabor principais.

Responda EXCLUSIVAMENTE com um objeto JSON com as chaves "cakeName", "description" e \
"flavorNotes" (array de strings).
"""
