"""🧩 Спільні модулі, що не залежать від платформи."""
