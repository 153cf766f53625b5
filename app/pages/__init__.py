# Páginas do menu principal (cada uma expõe render_*; carregadas sob demanda via app.menu)
